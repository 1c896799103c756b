import os
import json

CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config", "server.json")
DEFAULT_SEED_PATH = os.path.join(os.path.dirname(__file__), "db", "people.json")

with open(CONFIG_PATH) as f:
    config_data = json.load(f)

def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")

HOST = os.getenv("SHARK_HOST", config_data.get("HOST", "127.0.0.1"))
PORT = int(os.getenv("SHARK_PORT", config_data.get("PORT", 4000)))
DEBUG = _as_bool(os.getenv("SHARK_DEBUG", config_data.get("DEBUG", False)))
GRAPHIQL = _as_bool(os.getenv("SHARK_GRAPHIQL", config_data.get("GRAPHIQL", True)))
INTROSPECTION = _as_bool(os.getenv("SHARK_INTROSPECTION", config_data.get("INTROSPECTION", True)))
CORS_ORIGINS = os.getenv("SHARK_CORS_ORIGINS", config_data.get("CORS_ORIGINS", "*"))
# Empty means the packaged seed
SEED_PATH = os.getenv("SHARK_SEED_PATH", config_data.get("SEED_PATH", "")) or DEFAULT_SEED_PATH

def as_dict(**overrides) -> dict:
    settings = {
        "HOST": HOST,
        "PORT": PORT,
        "DEBUG": DEBUG,
        "GRAPHIQL": GRAPHIQL,
        "INTROSPECTION": INTROSPECTION,
        "CORS_ORIGINS": CORS_ORIGINS,
        "SEED_PATH": SEED_PATH,
    }
    settings.update(overrides)
    return settings
