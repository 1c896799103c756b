from flask import Flask, request, jsonify
from flask_cors import CORS
from ariadne import make_executable_schema, graphql_sync, format_error
from ariadne.explorer import ExplorerGraphiQL
from werkzeug.exceptions import HTTPException
from .schema import type_defs
from .routes import query, mutation, person
from .store import RecordStore
from . import settings as default_settings
from .utils.logger import write_log, log_graphql_request

schema = make_executable_schema(type_defs, [query, mutation, person])

def _error_formatter(error, debug: bool = False) -> dict:
    formatted = format_error(error, debug)
    write_log({
        "event": "graphql_error",
        "message": formatted.get("message"),
        "path": formatted.get("path")
    }, stream="graphql")
    return formatted

def _cors_origins(value):
    if isinstance(value, (list, tuple)):
        return list(value)
    if not value or value.strip() == "*":
        return "*"
    return [origin.strip() for origin in value.split(",") if origin.strip()]

def create_app(store: RecordStore = None, **overrides):
    config = default_settings.as_dict(**overrides)
    if store is None:
        store = RecordStore.from_file(config["SEED_PATH"])

    app = Flask(__name__)
    app.config.update(config)
    app.extensions["record_store"] = store
    CORS(app, origins=_cors_origins(config["CORS_ORIGINS"]))

    @app.route("/graphql", methods=["GET"])
    def graphql_playground():
        if not app.config["GRAPHIQL"]:
            return jsonify({"error": "GraphiQL explorer is disabled"}), 405
        return ExplorerGraphiQL(title="Shark Server").html(None), 200

    @app.route("/graphql", methods=["POST"])
    def graphql_server():
        data = request.get_json(silent=True)
        context = {"request": request, "store": store}

        success, result = graphql_sync(
            schema,
            data,
            context_value=context,
            debug=app.config["DEBUG"],
            introspection=app.config["INTROSPECTION"],
            error_formatter=_error_formatter
        )
        log_graphql_request(data, success, remote_addr=request.remote_addr)
        status_code = 200 if success else 400
        return jsonify(result), status_code

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok", "records": len(store)}), 200

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        write_log({"event": "http_error", "code": e.code, "path": request.path}, stream="http")
        return jsonify({"error": e.name, "description": e.description}), e.code

    return app
