from html import escape
from typing import List

from qr_tracker.scan_history import ScanRecord

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <title>{title}</title>
  <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-gray-100 p-8">
  <div class="{width} mx-auto bg-white shadow-lg rounded-xl p-6">
{body}
    <a href="/" class="inline-block mt-6 text-blue-500 hover:underline">&larr; Back to Generator</a>
  </div>
</body>
</html>
"""

EMPTY_ROW = '<tr><td colspan="4" class="p-4 text-center text-gray-500">No scans yet</td></tr>'


def render_qr_page(campaign: str, qr_data_url: str, tracking_url: str) -> str:
    body = f"""    <h2 class="text-xl font-semibold mb-4">QR Code for campaign: {escape(campaign)}</h2>
    <img src="{qr_data_url}" alt="QR Code" class="mb-4" />
    <p><strong>Scan URL:</strong> <a href="{escape(tracking_url)}" target="_blank" class="text-blue-600 underline">{escape(tracking_url)}</a></p>"""
    return PAGE_TEMPLATE.format(title="QR Code Generated", width="max-w-xl", body=body)


def _render_row(record: ScanRecord) -> str:
    cells = [record.campaign, record.timestamp, record.ip, record.user_agent or ""]
    tds = "".join(f'<td class="p-2">{escape(c)}</td>' for c in cells)
    return f'      <tr class="border-t hover:bg-gray-50">{tds}</tr>'


def render_dashboard(records: List[ScanRecord]) -> str:
    """Render the scan table. Rows are emitted in the order given."""
    rows = "\n".join(_render_row(r) for r in records) or EMPTY_ROW
    body = f"""    <h1 class="text-2xl font-semibold mb-6">QR Scan Dashboard</h1>
    <table class="table-auto w-full text-sm">
      <thead class="bg-gray-200 text-left text-gray-700 uppercase">
        <tr>
          <th class="p-2">Campaign</th>
          <th class="p-2">Timestamp</th>
          <th class="p-2">IP</th>
          <th class="p-2">Device</th>
        </tr>
      </thead>
      <tbody>
{rows}
      </tbody>
    </table>"""
    return PAGE_TEMPLATE.format(title="Scan Dashboard", width="max-w-6xl", body=body)
