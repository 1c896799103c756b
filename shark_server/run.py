import argparse
from shark_server.api import create_app
from shark_server.api import settings
from shark_server.api.utils.logger import write_log

def build_parser():
    parser = argparse.ArgumentParser(description="Launch the shark GraphQL server")
    parser.add_argument("--host", default=settings.HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port to run the server on")
    parser.add_argument("--debug", action="store_true", default=settings.DEBUG, help="Enable Flask debug mode")
    parser.add_argument("--seed", default=settings.SEED_PATH, help="JSON file with the initial people")
    parser.add_argument("--cert", help="TLS certificate (PEM)")
    parser.add_argument("--key", help="TLS private key (PEM)")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)
    if bool(args.cert) != bool(args.key):
        raise SystemExit("--cert and --key must be given together")

    app = create_app(DEBUG=args.debug, SEED_PATH=args.seed)
    ssl_context = (args.cert, args.key) if args.cert else None
    scheme = "https" if ssl_context else "http"

    write_log({"event": "server_start", "host": args.host, "port": args.port, "tls": bool(ssl_context)}, stream="system")
    print(f"Now browse to {scheme}://{args.host}:{args.port}/graphql")

    app.run(
        host=args.host,
        debug=args.debug,
        port=args.port,
        ssl_context=ssl_context
    )

if __name__ == "__main__":
    main()
