"""Entrypoint: python -m commerce_service [server|gen-api-docs|gen-access-token]"""
from __future__ import annotations

import argparse
import json
import uuid
from pathlib import Path

import uvicorn

from commerce_service.config import get_settings


def _serve() -> None:
    settings = get_settings()
    uvicorn.run(
        "commerce_service.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


def _gen_api_docs(output: Path) -> None:
    from commerce_service.app import create_app

    schema = create_app(get_settings()).openapi()
    output.write_text(json.dumps(schema, indent=2))
    print(f"OpenAPI schema written to {output}")


def _gen_access_token(user_id: str | None) -> None:
    from commerce_service.infrastructure.auth.tokens import generate_access_token

    settings = get_settings()
    token = generate_access_token(
        user_id or str(uuid.uuid4()),
        settings.ACCESS_TOKEN_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expires_in=settings.access_token_ttl,
    )
    print(f"Bearer {token}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="commerce_service")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("server", help="run the HTTP API (default)")
    docs = sub.add_parser("gen-api-docs", help="write the OpenAPI schema as JSON")
    docs.add_argument("--output", type=Path, default=Path("openapi.json"))
    token = sub.add_parser("gen-access-token", help="print a bearer token for local testing")
    token.add_argument("--user-id", default=None)

    args = parser.parse_args(argv)
    if args.command == "gen-api-docs":
        _gen_api_docs(args.output)
    elif args.command == "gen-access-token":
        _gen_access_token(args.user_id)
    else:
        _serve()


if __name__ == "__main__":
    main()
