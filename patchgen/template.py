"""Template loading and patch assembly."""

import json

from patchgen.errors import TemplateParseError, TemplateReadError


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def load_template(path):
    """Read a JSON patch template. The result is passed through untouched apart from `regions`."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateReadError(f"Unable to read template file! {e}") from e

    try:
        template = json.loads(contents, parse_constant=_reject_constant)
    except ValueError as e:
        raise TemplateParseError(f"Unable to parse template JSON - is the syntax valid? ({e})") from e

    if not isinstance(template, dict):
        raise TemplateParseError(
            f"Template must be a JSON object, got {type(template).__name__} ({path})"
        )
    return template


def assemble_patch(template: dict, regions) -> dict:
    """Append regions after any the template already has. Mutates and returns template."""
    existing = template.setdefault("regions", [])
    if not isinstance(existing, list):
        raise TemplateParseError("Template field 'regions' must be a list")
    existing.extend(regions)
    return template
