"""Human-readable summaries of rule matchers and steps."""

from .tree import Rule, get_rule_part_key


def _describe_matcher(matcher: dict) -> str | None:
    key = get_rule_part_key(matcher)

    if key == "wildcard":
        return None
    if key == "method":
        return f"{matcher.get('method', 'ANY')} requests"
    if key in ("simple-path", "path"):
        return f"for {matcher.get('path', '/')}"
    if key == "regex-path":
        return f"for paths matching /{matcher.get('regexSource', '')}/"
    if key == "host":
        return f"to {matcher.get('host')}"
    if key == "query":
        return "with a matching query"
    if key == "header":
        return "with matching headers"
    if key in ("raw-body", "raw-body-includes", "json-body", "json-body-matching"):
        return "with a matching body"
    if key == "protocol":
        return f"over {matcher.get('protocol', 'http')}"
    if key == "port":
        return f"on port {matcher.get('port')}"
    return f"matching {key}" if key else None


def summarize_matcher(rule: Rule) -> str:
    """Summarize which requests a rule matches, e.g. 'GET requests for /api'."""
    if not rule.matchers:
        return "Never"

    parts = [
        part for part in (_describe_matcher(m) for m in rule.matchers) if part
    ]

    if not parts:
        return "Any requests"
    if not parts[0].endswith("requests"):
        parts.insert(0, "Requests")
    return " ".join(parts)


def _describe_step(step: dict) -> str:
    key = get_rule_part_key(step)

    if key == "simple":
        status = step.get("status", 200)
        message = step.get("statusMessage")
        return f"Respond with {status}" + (f" {message}" if message else "")
    if key == "file":
        return f"Respond with {step.get('status', 200)} and the contents of {step.get('filePath')}"
    if key == "passthrough":
        return "Pass the request on to its destination"
    if key == "forward-to-host":
        target = step.get("targetHost") or (step.get("forwarding") or {}).get("targetHost")
        return f"Forward the request to {target}"
    if key == "close-connection":
        return "Close the connection"
    if key == "reset-connection":
        return "Reset the connection"
    if key == "timeout":
        return "Time out with no response"
    if key == "delay":
        return f"Wait {step.get('delayMs', 0)}ms"
    if key == "callback":
        return "Call a custom callback"
    return f"Run a {key} step" if key else "Do nothing"


def summarize_steps(rule: Rule) -> str:
    """Summarize what a rule does with matched requests."""
    if not rule.steps:
        return "Do nothing"
    return ", then ".join(_describe_step(step) for step in rule.steps)
