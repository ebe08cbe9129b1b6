"""JSON exporter."""
import json
from pathlib import Path
from typing import Any


class JsonExporter:
    """Export a built webhook payload to JSON."""

    def export(self, output_file: Path, payload: Any) -> None:
        """Export to JSON file."""
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
            f.write("\n")

    @staticmethod
    def dumps(payload: Any) -> str:
        """Serialize a payload for display."""
        return json.dumps(payload, indent=2, ensure_ascii=False)
