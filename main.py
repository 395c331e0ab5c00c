"""
main.py — Sorting Visualizer Schema Service
============================================
Flask app that hands the browser driver the two things it cannot build
itself: the algorithm catalog and a validator for its session snapshots.

Routes:
  GET  /api/algorithms              – every catalog entry, declaration order
  GET  /api/algorithms/<key>        – one catalog entry (404 if unknown)
  GET  /api/session/new             – fresh session from configured defaults
                                      ?viewMode=&arraySize=&seed=&primary=&secondary=
  POST /api/session/validate        – report every schema violation in a snapshot
  POST /api/compare                 – score two finished runs, return the session
                                      with comparisonResult published
                                      (the snapshot must validate first)
  GET  /api/config                  – session defaults the driver should start from

State management:
  None.  Every request decodes what it is given, answers, and forgets it;
  sessions live in the browser.

Errors:
  SchemaError subclasses become {"error": code, "message": …} bodies:
    invalid_field / inconsistent_timestamps / invalid_identifier → 400
    inconsistent_result                                          → 409
"""

from typing import Any, Dict

from flask import Flask, current_app, jsonify, request

from algorithms import get_algorithm, list_algorithms
from engine import conclude
from shared import Config, get_logger, setup_logging
from shared.errors import InconsistentResult, InvalidField, SchemaError
from state import VisualizationSession, new_session, session_errors, validate_session


app = Flask(__name__)
app.config["SORTVIS"] = Config.from_env()

logger = get_logger(__name__)
app.json.sort_keys = False


def get_config() -> Config:
    return current_app.config["SORTVIS"]


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------
def read_json() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidField("Request body must be a JSON object")
    return data


def decode_session(data: Dict[str, Any]) -> VisualizationSession:
    """Decode a session snapshot; structural problems become InvalidField."""
    try:
        return VisualizationSession.from_dict(data)
    except SchemaError:
        raise
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise InvalidField(f"Malformed session payload: {exc}") from exc


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.errorhandler(SchemaError)
def handle_schema_error(err: SchemaError):
    status = 409 if isinstance(err, InconsistentResult) else 400
    logger.warning("Rejected request to %s: %s", request.path, err.message)
    body = {"error": err.code, "message": err.message}
    if err.field:
        body["field"] = err.field
    return jsonify(body), status


# ---------------------------------------------------------------------------
# API: Catalog
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"algorithms": [info.to_dict() for info in list_algorithms()]})


@app.route("/api/algorithms/<key>")
def api_algorithm(key: str):
    info = get_algorithm(key)
    if info is None:
        return jsonify({
            "error": "invalid_identifier",
            "message": f"Unknown algorithm: {key!r}",
        }), 404
    return jsonify(info.to_dict())


# ---------------------------------------------------------------------------
# API: Sessions
# ---------------------------------------------------------------------------
@app.route("/api/config")
def api_config():
    cfg = get_config()
    return jsonify({
        "arraySize":          cfg.array_size,
        "maxArraySize":       cfg.max_array_size,
        "speed":              cfg.speed,
        "theme":              cfg.theme,
        "viewMode":           cfg.view_mode,
        "defaultAlgorithm":   cfg.default_algorithm,
        "secondaryAlgorithm": cfg.secondary_algorithm,
    })


@app.route("/api/session/new")
def api_session_new():
    session = new_session(
        config=get_config(),
        seed=request.args.get("seed", type=int),
        view_mode=request.args.get("viewMode"),
        array_size=request.args.get("arraySize", type=int),
        primary_algorithm=request.args.get("primary"),
        secondary_algorithm=request.args.get("secondary"),
    )
    return jsonify(session.to_dict())


@app.route("/api/session/validate", methods=["POST"])
def api_session_validate():
    session = decode_session(read_json())
    errors  = session_errors(session)
    if errors:
        logger.debug("Session snapshot has %d violation(s)", len(errors))
    return jsonify({
        "valid":  not errors,
        "errors": [e.to_dict() for e in errors],
    })


@app.route("/api/compare", methods=["POST"])
def api_compare():
    session = decode_session(read_json())
    validate_session(session)
    conclude(session)
    return jsonify(session.to_dict())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cfg = app.config["SORTVIS"]
    setup_logging(cfg.log_level)
    print("=" * 60)
    print("  Sorting Visualizer Schema Service")
    print("  Starting Flask server...")
    print(f"  Open http://localhost:{cfg.port}/api/algorithms")
    print("=" * 60)
    app.run(debug=cfg.debug, host=cfg.host, port=cfg.port)
