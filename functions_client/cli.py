from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import NoReturn

from functions_client.client import FunctionsClient
from functions_client.core.body import InvokeBody
from functions_client.core.config import FunctionsClientConfig
from functions_client.core.logging_config import setup_logging
from functions_client.models.result import Blob, FunctionsResponse, ResponseType

PROG = "functions-client"


@dataclass(frozen=True)
class InvokeInput:
    url: str
    path: str
    auth: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: InvokeBody = None
    response_type: ResponseType = ResponseType.JSON


def _exit_parser_error(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    print(f"Hint: run `{PROG} --help`.", file=sys.stderr)
    raise SystemExit(1)


class _CliArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        _exit_parser_error(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _CliArgumentParser(
        prog=PROG,
        description="Invoke a function through the gateway and print its response.",
    )
    parser.add_argument("path", help="Function path, optionally with a query string")
    parser.add_argument("--url", default="", help="Gateway base URL (default: $FUNCTIONS_URL)")
    parser.add_argument("--auth", default="", help="Bearer credential (default: $FUNCTIONS_AUTH)")
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        help="Request header as 'Key: Value' (repeatable)",
    )

    body = parser.add_mutually_exclusive_group()
    body.add_argument("--data", help="Text body (sent as text/plain unless -H overrides)")
    body.add_argument("--data-file", help="File sent as a binary body")
    body.add_argument(
        "--form",
        action="append",
        help="Form field as key=value (repeatable, order preserved)",
    )

    parser.add_argument(
        "--response-type",
        choices=[member.value for member in ResponseType],
        default=ResponseType.JSON.value,
        help="How to decode the response body",
    )
    parser.add_argument("--log-level", default="", help="Log level (default: $LOG_LEVEL)")
    parser.add_argument("--logging-config", default=None, help="logging dictConfig YAML file")
    return parser


def parse_header(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition(":")
    if not sep or not key.strip():
        raise ValueError(f"invalid header {raw!r}; expected 'Key: Value'")
    return key.strip(), value.strip()


def parse_form_field(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise ValueError(f"invalid form field {raw!r}; expected key=value")
    return key, value


def _resolve_body(args: argparse.Namespace) -> InvokeBody:
    if args.data is not None:
        return args.data
    if args.data_file:
        return Path(args.data_file).read_bytes()
    if args.form:
        return [parse_form_field(item) for item in args.form]
    return None


def build_input(args: argparse.Namespace, config: FunctionsClientConfig) -> InvokeInput:
    url = args.url or config.FUNCTIONS_URL
    if not url:
        raise ValueError("no gateway URL; pass --url or set FUNCTIONS_URL")

    headers: dict[str, str] = {}
    for raw in args.header:
        key, value = parse_header(raw)
        headers[key] = value

    return InvokeInput(
        url=url,
        path=args.path,
        auth=args.auth or config.FUNCTIONS_AUTH,
        headers=headers,
        body=_resolve_body(args),
        response_type=ResponseType.parse(args.response_type),
    )


def execute_invoke(input_data: InvokeInput, config: FunctionsClientConfig) -> FunctionsResponse:
    with FunctionsClient(input_data.url, auth=input_data.auth or None, config=config) as client:
        return client.invoke(
            input_data.path,
            headers=input_data.headers,
            body=input_data.body,
            response_type=input_data.response_type,
        )


def _print_data(data) -> None:
    if isinstance(data, Blob):
        data = data.content
    if isinstance(data, bytes):
        sys.stdout.flush()
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    if isinstance(data, str):
        print(data)
        return
    print(json.dumps(data, indent=2, ensure_ascii=False))


def run(argv: list[str]) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = FunctionsClientConfig()
    setup_logging(args.logging_config, level=args.log_level or config.LOG_LEVEL)

    try:
        input_data = build_input(args, config)
        result = execute_invoke(input_data, config)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if result.error is not None:
        print(f"{type(result.error).__name__}: {result.error}", file=sys.stderr)
        return 1

    _print_data(result.data)
    return 0


def main() -> int:
    return run(sys.argv[1:])
