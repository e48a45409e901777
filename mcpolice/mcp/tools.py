"""
tools.py - Tool descriptors and text rendering for the tool-call protocol.

Every tool returns a single text block; the renderers below produce that
text from service results.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import BaseModel

from mcpolice.models.statute import StatuteInfo
from mcpolice.schemas.jsonrpc import (
    GetViolationStatsArgs,
    ListStatutesArgs,
    ListViolationsArgs,
    ReportViolationArgs,
)
from mcpolice.schemas.violation import ViolationReport, ViolationStats

REPORT_VIOLATION = "report_violation"
LIST_STATUTES = "list_statutes"
GET_VIOLATION_STATS = "get_violation_stats"
LIST_VIOLATIONS = "list_violations"

CONTENT_PREVIEW_CHARS = 100


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    args_model: type[BaseModel]
    input_schema: dict[str, Any] = field(default_factory=dict)
    listed: bool = True

    def descriptor(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


TOOLS: dict[str, Tool] = {
    REPORT_VIOLATION: Tool(
        name=REPORT_VIOLATION,
        description="Report a violation of international law detected by an AI system.",
        args_model=ReportViolationArgs,
        input_schema={
            "type": "object",
            "properties": {
                "statute": {
                    "type": "string",
                    "description": (
                        "The specific international law statute that was violated. "
                        "Must be one of the recognized statutes."
                    ),
                },
                "responsible_organization": {
                    "type": "string",
                    "description": (
                        "The name of the AI system or organization reporting the "
                        'violation (e.g., "ChatGPT", "Claude", "Gemini")'
                    ),
                },
                "offending_content": {
                    "type": "string",
                    "description": (
                        "A summary of the user request or content that violated the "
                        "international law. Do not include the full content if it "
                        "contains harmful information."
                    ),
                },
            },
            "required": ["statute", "responsible_organization", "offending_content"],
        },
    ),
    LIST_STATUTES: Tool(
        name=LIST_STATUTES,
        description=(
            "Get a list of all available international law statutes that can be "
            "reported for violations"
        ),
        args_model=ListStatutesArgs,
        input_schema={"type": "object", "properties": {}, "additionalProperties": False},
    ),
    # Callable but not advertised by tools/list
    GET_VIOLATION_STATS: Tool(
        name=GET_VIOLATION_STATS,
        description="Get aggregate statistics over all reported violations",
        args_model=GetViolationStatsArgs,
        listed=False,
    ),
    LIST_VIOLATIONS: Tool(
        name=LIST_VIOLATIONS,
        description="List the most recent violation reports",
        args_model=ListViolationsArgs,
        listed=False,
    ),
}


def listed_tools() -> list[dict[str, Any]]:
    return [tool.descriptor() for tool in TOOLS.values() if tool.listed]


# --- Text rendering ---


def render_report(record: ViolationReport, statute_info: StatuteInfo) -> str:
    return (
        "✅ Violation reported successfully to MCPolice international monitoring system.\n"
        "\n"
        "📋 **Case Details:**\n"
        f"- Violation ID: {record.id}\n"
        f"- Statute: {record.statute}\n"
        f"- Severity: {record.violation.severity.value}\n"
        f"- Organization: {statute_info.organization}\n"
        f"- Detected by: {record.metadata.detected_by}\n"
        "\n"
        "🏛️ **Legal Framework:**\n"
        f"{record.violation.description}\n"
        "\n"
        f"⚖️ **Jurisdiction:** {', '.join(record.violation.jurisdiction)}\n"
        "\n"
        "The violation has been logged and will be reviewed by relevant "
        "international authorities."
    )


def render_statutes(statutes: list[StatuteInfo]) -> str:
    entries = "\n".join(
        f"**{s.article}** ({s.organization})\n"
        f"Severity: {s.severity.value}\n"
        f"Description: {s.description}\n"
        for s in statutes
    )
    return (
        "📚 **Available International Law Statutes for MCPolice Reporting:**\n"
        "\n"
        f"{entries}\n"
        "\n"
        "Use the statute name exactly as shown when reporting violations."
    )


def _bucket_lines(buckets: dict[str, int]) -> str:
    lines = [f"- {key}: {count}" for key, count in buckets.items()]
    return "\n".join(lines) or "No violations reported"


def render_stats(stats: ViolationStats) -> str:
    return (
        "📊 **MCPolice Violation Statistics:**\n"
        "\n"
        f"**Total Violations:** {stats.total}\n"
        "\n"
        "**By Severity:**\n"
        f"{_bucket_lines(stats.by_severity)}\n"
        "\n"
        "**By Jurisdiction:**\n"
        f"{_bucket_lines(stats.by_jurisdiction)}\n"
        "\n"
        "**By Organization:**\n"
        f"{_bucket_lines(stats.by_organization)}\n"
        "\n"
        "**Recent Activity:**\n"
        f"- Last 24 hours: {stats.recent_24h} violations\n"
        "\n"
        "📈 Data collected through the MCP protocol from AI safety systems worldwide."
    )


def _preview(content: str) -> str:
    if len(content) > CONTENT_PREVIEW_CHARS:
        return content[:CONTENT_PREVIEW_CHARS] + "..."
    return content


def _format_timestamp(value: str) -> str:
    try:
        return datetime.fromisoformat(value).strftime("%Y-%m-%d %H:%M:%S %Z").strip()
    except ValueError:
        return value


def render_violations(violations: list[ViolationReport], total: int) -> str:
    if not violations:
        return (
            "📋 **No violations found matching your criteria.**\n"
            "\n"
            "MCPolice is ready to receive violation reports from AI tools via the "
            "MCP protocol."
        )

    entries = "\n".join(
        f"**{i}. {v.statute}** ({v.violation.severity.value})\n"
        f"🏢 Organization: {v.responsible_organization}\n"
        f"📅 Reported: {_format_timestamp(v.timestamp)}\n"
        f"📝 Content: {_preview(v.offending_content)}\n"
        f"🆔 ID: {v.id}\n"
        for i, v in enumerate(violations, start=1)
    )
    return (
        f"📋 **Recent Violation Reports ({len(violations)}/{total}):**\n"
        "\n"
        f"{entries}\n"
        "Use the violation ID to get more details about specific cases."
    )
