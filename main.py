import sys
import logging
import argparse
from dataclasses import replace
from opentelemetry import trace
from wikialt.config import DEFAULT_CONFIG
from wikialt.models import XMLMultiPageDoc
from wikialt.pipeline import run
from wikialt.tracing import setup_tracing, get_tracer


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Find alternative titles and anchor texts in a MediaWiki XML dump')
    parser.add_argument('dump_path', nargs='?', default=DEFAULT_CONFIG.dump_path)
    parser.add_argument('-o', '--output', default=DEFAULT_CONFIG.output_path)
    parser.add_argument('--author', default=DEFAULT_CONFIG.author)
    parser.add_argument('--namespaces', default=None,
                        help='Comma separated content namespaces (default: 0)')
    parser.add_argument('--js-variable', default=DEFAULT_CONFIG.js_variable,
                        help='Wrap output as "var NAME = {...};"')
    parser.add_argument('--indent', type=int, default=DEFAULT_CONFIG.indent)
    parser.add_argument('--log-level', default=DEFAULT_CONFIG.log_level)
    parser.add_argument('--tracing', action='store_true', default=DEFAULT_CONFIG.tracing_enabled)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s - %(levelname)s - %(message)s')

    config = replace(
        DEFAULT_CONFIG,
        dump_path=args.dump_path,
        output_path=args.output,
        author=args.author,
        js_variable=args.js_variable,
        indent=args.indent,
        tracing_enabled=args.tracing,
    )
    if args.namespaces:
        config = replace(config, content_namespaces=frozenset(int(ns) for ns in args.namespaces.split(',') if ns.strip()))

    if config.tracing_enabled:
        setup_tracing(config.service_name)
    tracer = get_tracer(__name__)

    with tracer.start_as_current_span("wikialt_run") as span:
        span.set_attribute("wikialt.dump_path", config.dump_path)
        logging.info(f"Parsing XML file: {config.dump_path}")
        doc = XMLMultiPageDoc(config.dump_path, content_namespaces=config.content_namespaces)
        try:
            run(doc, output_path=config.output_path, config=config)
        except FileNotFoundError as e:
            logging.error(f"File not found: {e.filename}")
            span.record_exception(e)
            span.set_status(trace.Status(trace.StatusCode.ERROR))
            return 1
        except OSError as e:
            logging.error(f"I/O error: {e}", exc_info=True)
            span.record_exception(e)
            span.set_status(trace.Status(trace.StatusCode.ERROR))
            return 1

    logging.info("Finished processing.")
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
