#!/usr/bin/env python3
"""
Example: create a short, shareable chart URL through the QuickChart service
"""

import asyncio

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


async def main() -> None:
    client = QuickchartClient().set_chart(CHART_CONFIG).set_width(800).set_height(400)

    short_url = await client.fetch_short_url()

    print(f"Short URL: {short_url}")
    print("\nYou can share this URL or open it in your browser to view the chart!")


if __name__ == "__main__":
    asyncio.run(main())
