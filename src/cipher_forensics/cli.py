"""Interfejs wiersza poleceń do analizy plików konfiguracyjnych."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Sequence

import structlog

from cipher_forensics.analysis import AnalysisOrchestrator, inspect_buffer
from cipher_forensics.core.models import ForensicReport
from cipher_forensics.reporting import DefaultReportExporter, ExportFormat
from cipher_forensics.shared import AppConfig, FileTooLargeError, configure_logging, write_error_report
from cipher_forensics.toolkit import PAYLOAD_METHODS, EncodeMode, encode_text, generate_local_payload, manual_decode


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="cipher-forensics",
        description="Offline triage of VPN/proxy configuration files and unknown binaries.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Wyświetla szczegółowe logi",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    analyze = commands.add_parser("analyze", help="Analizuje plik i buduje raport")
    analyze.add_argument("file", type=Path, help="Ścieżka do analizowanego pliku")
    analyze.add_argument(
        "--output",
        type=Path,
        help="Ścieżka do pliku wynikowego (domyślnie: standardowe wyjście)",
    )
    analyze.add_argument(
        "--format",
        choices=[fmt.value for fmt in ExportFormat],
        default=ExportFormat.JSON.value,
        help="Format raportu (domyślnie: json)",
    )
    analyze.add_argument(
        "--local-only",
        action="store_true",
        help="Pomija analizator w chmurze nawet przy skonfigurowanym kluczu API",
    )

    decode = commands.add_parser("decode", help="Dekoduje base64 lub kodowanie URL")
    decode.add_argument("text", help="Tekst do zdekodowania")

    encode = commands.add_parser("encode", help="Koduje tekst (base64/hex/rot13)")
    encode.add_argument("text", help="Tekst do zakodowania")
    encode.add_argument(
        "--mode",
        choices=[mode.value for mode in EncodeMode],
        default=EncodeMode.BASE64.value,
        help="Tryb kodowania (domyślnie: base64)",
    )

    payload = commands.add_parser("payload", help="Generuje offline payload HTTP Injector")
    payload.add_argument("host", help="Host docelowy (bug host)")
    payload.add_argument(
        "--method",
        choices=list(PAYLOAD_METHODS),
        default="CONNECT",
        help="Metoda payloadu (domyślnie: CONNECT)",
    )
    return parser


def _run_analysis(args: Namespace, config: AppConfig | None = None) -> int:
    logger = structlog.get_logger(__name__)
    if config is None:
        try:
            config = AppConfig.from_env()
        except ValueError as exc:
            logger.error("invalid-config", error=str(exc))
            return 2
    path: Path = args.file

    if not path.is_file():
        logger.error("file-not-found", path=str(path))
        return 1

    try:
        data = config.read_input(path)
    except FileTooLargeError as exc:
        logger.error("file-too-large", path=str(path), error=str(exc))
        return 1

    try:
        orchestrator = AnalysisOrchestrator.from_env(allow_cloud=config.cloud_enabled and not args.local_only)
        logger.info("starting-analysis", file=path.name, size=len(data), cloud=orchestrator.cloud_enabled)

        profile = inspect_buffer(path.name, data)
        result = orchestrator.analyze(path.name, data)
        report = ForensicReport(profile=profile, result=result)

        exporter = DefaultReportExporter()
        fmt = ExportFormat(args.format)
        if args.output is not None:
            output_path = exporter.export(report, config.report_dir / args.output, fmt)
            logger.info("analysis-complete", source=result.source.value, report=str(output_path))
        else:
            sys.stdout.write(exporter.render(report, fmt))
            if fmt is ExportFormat.JSON:
                sys.stdout.write("\n")
        return 0

    except Exception as exc:
        logger.exception("analysis-failed", error=str(exc))
        write_error_report(
            exc,
            where="cli.analyze",
            context={"format": args.format, "local_only": args.local_only},
            input_path=path,
        )
        return 1


def _run_toolkit(args: Namespace) -> int:
    if args.command == "decode":
        output = manual_decode(args.text)
    elif args.command == "encode":
        try:
            output = encode_text(args.text, args.mode)
        except ValueError as exc:
            structlog.get_logger(__name__).error("encode-failed", error=str(exc))
            return 1
    else:
        output = generate_local_payload(args.host, args.method)
    sys.stdout.write(output + "\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    if args.command == "analyze":
        return _run_analysis(args)
    return _run_toolkit(args)


if __name__ == "__main__":
    sys.exit(main())
