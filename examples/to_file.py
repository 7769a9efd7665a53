#!/usr/bin/env python3
"""
Example: render a chart remotely and save it as output.png
"""

import asyncio
import sys

from qchart import QuickchartClient, QuickchartError

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


async def main(path: str) -> int:
    client = QuickchartClient().set_chart(CHART_CONFIG).set_width(800).set_height(400)

    try:
        await client.save_to_file(path)
    except QuickchartError as e:
        print(f"Error writing chart to file ({e.kind}): {e}", file=sys.stderr)
        return 1

    print(f"Chart written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "output.png")))
