#!/usr/bin/env python3
"""
Example: build a chart URL locally

No network access is needed; open the printed URL in a browser to see the
chart.
"""

from qchart import QuickchartClient

CHART_CONFIG = """{
    type: 'bar',
    data: {
        labels: ['January', 'February', 'March', 'April'],
        datasets: [{
            label: 'Sales',
            data: [50, 60, 70, 80]
        }]
    }
}"""


def main() -> None:
    client = QuickchartClient().set_chart(CHART_CONFIG).set_width(800).set_height(400)

    url = client.build_url()

    print(f"Chart URL: {url}")
    print("\nYou can open this URL in your browser to view the chart!")


if __name__ == "__main__":
    main()
