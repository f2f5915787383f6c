"""
Dashboard JSON exporter.

Workflow: Collection snapshot -> Analytics views -> Dashboard JSON
"""

import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Optional

from ..models.views import Dashboard

EXPORTER_VERSION = "1.0.0"
REQUIRED_VIEWS = ["lifetime", "genres", "recap", "favorites", "goal_progress"]


class DashboardExporter:
    """
    Writes a Dashboard to a JSON document for rendering.

    Book entries in the document never include private notes.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def export(self, dashboard: Dashboard, output_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Export a dashboard to JSON.

        Args:
            dashboard: Views computed for one owner and year
            output_path: Where to save the JSON file (if None, generates UUID filename)

        Returns:
            The exported document with 'export_path' added
        """
        export_uuid = str(uuid.uuid4())

        if output_path is None:
            output_path = f"dashboard_data/{export_uuid}.json"

        views = dashboard.to_dict()
        export_data = {
            "export_id": export_uuid,
            "owner": views.pop("owner"),
            "year": views.pop("year"),
            "generated_at": datetime.now().isoformat(),
            "exporter_version": EXPORTER_VERSION,
            "views": views,
        }

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(export_data, f, indent=2, ensure_ascii=False, default=str)

        self.logger.info(f"Exported dashboard {export_uuid} for {dashboard.owner} to {output_path}")

        export_data["export_path"] = str(output_path)
        return export_data

    def validate_export(self, export_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Check an exported document for the keys a dashboard needs.

        Returns:
            Validation report with any issues found
        """
        issues = []
        warnings = []

        for key in ["export_id", "owner", "year", "views"]:
            if key not in export_data:
                issues.append(f"Missing required key: {key}")

        views = export_data.get("views", {})
        for view in REQUIRED_VIEWS:
            if view not in views:
                issues.append(f"Missing view: {view}")

        lifetime = views.get("lifetime", {})
        genres = views.get("genres", [])
        if lifetime and genres:
            genre_total = sum(entry["count"] for entry in genres)
            if genre_total != lifetime.get("total_books_read"):
                issues.append(
                    f"Genre counts sum to {genre_total}, expected {lifetime.get('total_books_read')}"
                )

        recap = views.get("recap", {})
        if recap and recap.get("total_books") == 0:
            warnings.append(f"No finished books with an end date in {export_data.get('year')}")

        return {
            "is_valid": len(issues) == 0,
            "issues": issues,
            "warnings": warnings,
        }


def create_dashboard_json(dashboard: Dashboard, output_path: Optional[str] = None) -> str:
    """
    Convenience function to export and validate a dashboard.

    Returns:
        Path to the created JSON file
    """
    exporter = DashboardExporter()
    export_data = exporter.export(dashboard, output_path)

    validation = exporter.validate_export(export_data)

    if not validation["is_valid"]:
        raise ValueError(f"Export validation failed: {validation['issues']}")

    if validation["warnings"]:
        logger = logging.getLogger(__name__)
        for warning in validation["warnings"]:
            logger.warning(warning)

    return export_data["export_path"]
