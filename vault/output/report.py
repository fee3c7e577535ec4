"""
SecureVault Report Generator
=============================

Generates HTML and JSON reports from :class:`~shared.models.ScanResult`
objects. The HTML report uses inline CSS so that it renders without any
external assets; the JSON report is meant for scripts and CI pipelines.

The password itself never appears in a report; only its analysis does.
"""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from shared.models import ScanResult
from vault import __version__


_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>SecureVault Report - {title}</title>
    <style>
        :root {{
            --bg-primary: #0d1117;
            --bg-secondary: #161b22;
            --bg-tertiary: #21262d;
            --text-primary: #c9d1d9;
            --text-secondary: #8b949e;
            --accent-cyan: #58a6ff;
            --accent-green: #3fb950;
            --accent-yellow: #d29922;
            --accent-red: #f85149;
            --accent-purple: #bc8cff;
            --border: #30363d;
        }}
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: var(--bg-primary);
            color: var(--text-primary);
            line-height: 1.6;
            padding: 2rem;
        }}
        .container {{ max-width: 960px; margin: 0 auto; }}
        .header {{
            text-align: center;
            padding: 2rem;
            border: 1px solid var(--accent-cyan);
            border-radius: 8px;
            margin-bottom: 2rem;
            background: var(--bg-secondary);
        }}
        .header h1 {{ color: var(--accent-cyan); font-size: 2rem; }}
        .header .subtitle {{ color: var(--text-secondary); font-size: 0.9rem; }}
        .section {{
            background: var(--bg-secondary);
            border: 1px solid var(--border);
            border-radius: 8px;
            padding: 1.5rem;
            margin-bottom: 1.5rem;
        }}
        .section h2 {{
            color: var(--accent-purple);
            font-size: 1.4rem;
            margin-bottom: 1rem;
            padding-bottom: 0.5rem;
            border-bottom: 1px solid var(--border);
        }}
        table {{ width: 100%; border-collapse: collapse; margin: 1rem 0; }}
        th, td {{ padding: 0.75rem 1rem; text-align: left; border: 1px solid var(--border); }}
        th {{ background: var(--bg-tertiary); color: var(--accent-cyan); font-weight: 600; }}
        .meter {{
            height: 24px;
            background: var(--bg-tertiary);
            border-radius: 12px;
            overflow: hidden;
            border: 1px solid var(--border);
        }}
        .meter-fill {{ height: 100%; border-radius: 12px; }}
        .badge {{
            display: inline-block;
            padding: 0.25rem 0.75rem;
            border-radius: 4px;
            font-weight: 700;
            font-size: 0.85rem;
        }}
        .severity-info {{ background: rgba(88, 166, 255, 0.2); color: var(--accent-cyan); }}
        .severity-low {{ background: rgba(63, 185, 80, 0.2); color: var(--accent-green); }}
        .severity-medium {{ background: rgba(210, 153, 34, 0.2); color: var(--accent-yellow); }}
        .severity-high {{ background: rgba(248, 81, 73, 0.2); color: var(--accent-red); }}
        .severity-critical {{ background: rgba(248, 81, 73, 0.4); color: #ff7b72; }}
        .finding {{
            padding: 1rem;
            margin: 0.5rem 0;
            border-left: 4px solid var(--border);
            background: var(--bg-tertiary);
            border-radius: 0 4px 4px 0;
        }}
        .finding p {{ color: var(--text-secondary); font-size: 0.9rem; }}
        .footer {{
            text-align: center;
            padding: 1.5rem;
            color: var(--text-secondary);
            font-size: 0.8rem;
            border-top: 1px solid var(--border);
            margin-top: 2rem;
        }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>SecureVault</h1>
            <div class="subtitle">
                Password Strength Report | {target}<br>
                Generated: {timestamp}
            </div>
        </div>

        <div class="section">
            <h2>Summary</h2>
            <p>{summary}</p>
            {metrics_html}
        </div>

        <div class="section">
            <h2>Findings</h2>
            {findings_html}
        </div>

        <div class="footer">
            SecureVault v{version}<br>
            Report generated {timestamp}
        </div>
    </div>
</body>
</html>
"""

_METER_COLOURS: tuple[tuple[int, str], ...] = (
    (40, "var(--accent-red)"),
    (60, "var(--accent-yellow)"),
    (101, "var(--accent-green)"),
)


class VaultReportGenerator:
    """Generates HTML and JSON reports from SecureVault results.

    Usage::

        generator = VaultReportGenerator()
        generator.generate_html(scan_result, Path("report.html"))
        generator.generate_json(scan_result, Path("report.json"))
    """

    def build_json(self, result: ScanResult) -> dict[str, Any]:
        """Assemble the JSON report structure for *result*."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": __version__,
            },
            "summary": {
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "findings": [f.model_dump(mode="json") for f in result.findings],
            "analysis": result.metadata,
        }

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write the JSON report for *result* to *output_path*."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(self.build_json(result), indent=2, ensure_ascii=False, default=str),
            encoding="utf-8",
        )
        return output_path

    def generate_html(
        self,
        result: ScanResult,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Write the HTML report for *result* to *output_path*."""
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")

        html_content = _HTML_TEMPLATE.format(
            title=html.escape(title or result.target),
            target=html.escape(result.target),
            timestamp=timestamp,
            summary=html.escape(result.summary),
            metrics_html=self._build_metrics_html(result.metadata),
            findings_html=self._build_findings_html(result),
            version=__version__,
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
        return output_path

    # ------------------------------------------------------------------ #
    #  Private HTML Builders
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_metrics_html(metadata: dict[str, Any]) -> str:
        if not metadata:
            return ""

        score = int(metadata.get("score", 0))
        colour = next(c for bound, c in _METER_COLOURS if score < bound)
        rows = [
            ("Level", metadata.get("level", "")),
            ("Score", f"{score}/100"),
            ("Length", metadata.get("length", 0)),
            ("Character Set", metadata.get("charset_size", 0)),
            ("Entropy", f"{float(metadata.get('entropy', 0.0)):.2f} bits"),
            ("Complexity", f"{metadata.get('complexity', 0)}/4"),
            ("Crack Time", metadata.get("crack_time", "")),
            ("Commonality", metadata.get("commonality", "")),
        ]
        cells = "\n".join(
            f"<tr><th>{html.escape(str(k))}</th><td>{html.escape(str(v))}</td></tr>"
            for k, v in rows
        )
        return (
            f'<div class="meter"><div class="meter-fill" '
            f'style="width: {score}%; background: {colour};"></div></div>'
            f"<table>{cells}</table>"
        )

    @staticmethod
    def _build_findings_html(result: ScanResult) -> str:
        if not result.findings:
            return '<p style="color: var(--text-secondary);">No findings.</p>'

        parts: list[str] = []
        for finding in result.findings:
            severity = finding.severity
            parts.append(
                f'<div class="finding">'
                f'<h3><span class="badge {severity.css_class}">{severity.value}</span> '
                f"{html.escape(finding.title)}</h3>"
                f"<p>{html.escape(finding.description)}</p>"
            )
            if finding.recommendation:
                parts.append(
                    f"<p><strong>Recommendation:</strong> "
                    f"{html.escape(finding.recommendation)}</p>"
                )
            parts.append("</div>")
        return "\n".join(parts)
