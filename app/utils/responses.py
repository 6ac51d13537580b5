"""
Response result types.

Each handler branch produces exactly one variant, and each variant renders
exactly one JSON shape.
"""

from dataclasses import dataclass

from flask import jsonify


@dataclass(frozen=True)
class ProcessingSuccess:
    resultado: str
    prompt: str

    status_code = 200

    def to_response(self):
        return jsonify({"resultado": self.resultado, "prompt": self.prompt}), self.status_code


@dataclass(frozen=True)
class ProcessingFailure:
    error: str
    status_code: int = 500

    def to_response(self):
        return jsonify({"error": self.error}), self.status_code


@dataclass(frozen=True)
class HealthOk:
    users: int

    status_code = 200

    def to_response(self):
        return jsonify({"status": "ok", "db": "connected", "users": self.users}), self.status_code


@dataclass(frozen=True)
class HealthFailure:
    error: str

    status_code = 500

    def to_response(self):
        return jsonify({"status": "error", "error": self.error}), self.status_code
