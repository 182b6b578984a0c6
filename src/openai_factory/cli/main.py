# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""openai-factory CLI: show the configuration a Factory would resolve."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..client import Client
from ..errors import FactoryError
from ..factory import Factory
from ..log import redact_secret, setup_logging
from ..models.transporter import AUTHORIZATION_HEADER


def _pair(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {raw!r}")
    return name.strip(), value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openai-factory",
        description="Resolve an OpenAI client configuration from environment and flags (no requests are sent)",
    )
    parser.add_argument("--api-key", help="API key (defaults to OPENAI_API_KEY)")
    parser.add_argument("--organization", help="Organization id (defaults to OPENAI_ORGANIZATION)")
    parser.add_argument("--base-url", help="Base URL (defaults to OPENAI_BASE_URL or api.openai.com/v1)")
    parser.add_argument(
        "--header",
        action="append",
        type=_pair,
        default=[],
        metavar="NAME=VALUE",
        help="Extra HTTP header; repeatable",
    )
    parser.add_argument(
        "--query",
        action="append",
        type=_pair,
        default=[],
        metavar="NAME=VALUE",
        help="Extra query parameter; repeatable",
    )
    parser.add_argument("--json", action="store_true", help="Output JSON instead of a human-friendly summary")
    parser.add_argument("--log-level", help="Logging level (defaults to OPENAI_FACTORY_LOG_LEVEL or WARNING)")
    return parser


def build_factory(args: argparse.Namespace) -> Factory:
    factory = Factory.from_env()
    if args.api_key is not None:
        factory.with_api_key(args.api_key)
    if args.organization is not None:
        factory.with_organization(args.organization)
    if args.base_url is not None:
        factory.with_base_url(args.base_url)
    for name, value in args.header:
        factory.with_http_header(name, value)
    for name, value in args.query:
        factory.with_query_param(name, value)
    return factory


def describe_client(client: Client) -> dict[str, Any]:
    config = client.config
    headers: dict[str, str] = {}
    for name, value in config.headers:
        if name.lower() == AUTHORIZATION_HEADER.lower():
            scheme, _, secret = value.partition(" ")
            value = f"{scheme} {redact_secret(secret)}" if secret else redact_secret(scheme)
        headers[name] = value
    return {
        "base_uri": config.base_uri.to_string(),
        "headers": headers,
        "query_params": config.query_params.to_dict(),
        "http_client": type(config.http_client).__name__,
    }


def _pretty_print(summary: dict[str, Any]) -> None:
    print(f"Base URI    : {summary['base_uri']}")
    print(f"HTTP client : {summary['http_client']}")
    print("Headers:")
    for name, value in summary["headers"].items():
        print(f"  {name}: {value}")
    if summary["query_params"]:
        print("Query params:")
        for name, value in summary["query_params"].items():
            print(f"  {name}={value}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        client = build_factory(args).make()
    except FactoryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    with client:
        summary = describe_client(client)

    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        _pretty_print(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
