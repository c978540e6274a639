import json
import os

from PySide6.QtCore import qWarning

from .placeholders import format_template


class AlertDefinition:
    def __init__(self, code, message_template="", description=""):
        self.code = code
        self.message_template = message_template
        self.description = description

    def __repr__(self):
        return f"AlertDefinition({self.code!r}, {self.message_template!r})"

    def __eq__(self, other):
        if not isinstance(other, AlertDefinition):
            return NotImplemented
        return (self.code, self.message_template, self.description) == \
               (other.code, other.message_template, other.description)


class AlertCatalog:
    """
    Lookup table of alert code -> AlertDefinition, read from a JSON document:
        {"alerts": [{"code": 1, "message": "...", "description": "..."}]}
    A failed load leaves the catalog empty; callers fall back to raw codes.
    """

    def __init__(self):
        self._definitions = {}

    def load(self, source):
        """Loads definitions from a file path. Returns True on success."""
        self._definitions = {}
        if not source or not os.path.exists(source):
            qWarning(f"Failed to open alert definitions: {source}")
            return False

        try:
            with open(source, 'r', encoding='utf-8') as f:
                text = f.read()
        except OSError as e:
            qWarning(f"Error reading alert definitions {source}: {e}")
            return False

        return self.load_json(text)

    def load_json(self, text):
        self._definitions = {}
        try:
            doc = json.loads(text)
        except (TypeError, ValueError) as e:
            qWarning(f"Error parsing alert definitions: {e}")
            return False

        if not isinstance(doc, dict) or not isinstance(doc.get("alerts"), list):
            qWarning("Alert definitions have no 'alerts' array")
            return False

        definitions = {}
        for entry in doc["alerts"]:
            if not isinstance(entry, dict):
                continue
            code = entry.get("code")
            if isinstance(code, bool) or not isinstance(code, (int, float)):
                continue
            code = int(code)
            definitions[code] = AlertDefinition(
                code,
                _as_text(entry.get("message")),
                _as_text(entry.get("description")),
            )

        self._definitions = definitions
        return True

    def get(self, code):
        return self._definitions.get(code)

    def description(self, code):
        definition = self.get(code)
        return definition.description if definition else ""

    def render(self, code, params=()):
        """Display text for an alert: formatted template, or the raw code if unknown."""
        definition = self.get(code)
        if definition is None:
            return str(code)
        return format_template(definition.message_template, params)

    def __contains__(self, code):
        return code in self._definitions

    def __len__(self):
        return len(self._definitions)


def _as_text(value):
    if isinstance(value, str):
        return value
    return ""
