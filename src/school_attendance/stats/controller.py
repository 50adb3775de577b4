from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.http import json_endpoint
from ..container import Container
from ..core.enums import Role
from .model import AbsenceStats


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    stats = container.stats_service

    def _write_stats_csv(summary: AbsenceStats):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["metric", "count"], lineterminator="\n")
        writer.writeheader()
        for row in summary.to_rows():
            writer.writerow(row)
        return app.response_class(out.getvalue(), mimetype="text/csv")

    def _respond(summary: AbsenceStats):
        if request.args.get("format", "").lower() == "csv":
            return _write_stats_csv(summary)
        return jsonify(summary.to_dict())

    @app.route("/stats/class/<class_id>", methods=["GET"], endpoint="stats_class")
    @json_endpoint("computing class stats")
    @guards.authenticate
    @guards.require_role([Role.ADMIN])
    def stats_class(class_id: str):
        return _respond(stats.for_class(class_id))

    @app.route("/stats/student/<student_id>", methods=["GET"], endpoint="stats_student")
    @json_endpoint("computing student stats")
    @guards.authenticate
    @guards.require_role([Role.ADMIN])
    def stats_student(student_id: str):
        return _respond(stats.for_student(student_id))
