"""Export a forecast as self-contained HTML."""

import html
from datetime import datetime
from pathlib import Path

from city_forecast.models import WeatherDisplay


def render_rows(display: WeatherDisplay) -> str:
    """Render one table row per forecast entry."""
    return "\n".join(
        f"""                <tr>
                    <td class="label">{html.escape(entry.label)}</td>
                    <td class="temp">{html.escape(entry.temperature_label)}</td>
                </tr>"""
        for entry in display.forecasts
    )


def render_html(display: WeatherDisplay, generated_at: datetime | None = None) -> str:
    """Render the forecast page as a string."""
    generated_at = generated_at or datetime.now()
    city = html.escape(display.city)

    if display.forecasts:
        body = f"""<table>
            <thead>
                <tr><th>Time</th><th>Temperature</th></tr>
            </thead>
            <tbody>
{render_rows(display)}
            </tbody>
        </table>"""
    else:
        body = '<div class="empty">No forecast data available</div>'

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>Weather in {city}</title>
    <style>
        body {{ background: #0f172a; color: #e2e8f0; font-family: 'Inter', sans-serif; margin: 0; padding: 2rem; }}
        h1 {{ color: #f1f5f9; font-size: 1.5rem; margin: 0 0 0.25rem 0; }}
        .meta {{ color: #64748b; font-size: 0.75rem; margin-bottom: 1.5rem; }}
        table {{ border-collapse: collapse; background: #1e293b; border: 1px solid #334155; border-radius: 8px; }}
        th {{ color: #94a3b8; font-size: 0.7rem; text-transform: uppercase; letter-spacing: 0.1em; text-align: left; padding: 0.75rem 1.5rem; }}
        td {{ padding: 0.4rem 1.5rem; border-top: 1px solid #334155; }}
        td.temp {{ font-family: 'SF Mono', 'Consolas', monospace; text-align: right; }}
        .empty {{ color: #94a3b8; }}
    </style>
</head>
<body>
    <h1>Weather in {city}</h1>
    <div class="meta">Hourly temperature at 2 m | Generated {generated_at.strftime('%Y-%m-%d %H:%M')}</div>
    <main>
        {body}
    </main>
</body>
</html>
"""


def export_html(display: WeatherDisplay, output_path: Path | str) -> Path:
    """
    Write the forecast page to disk.

    Returns:
        Path of the written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_html(display), encoding="utf-8")
    return output_path
