"""
Command Line Interface

Entry point for the store locator scripts.

Usage:
    python -m store_locator photos --store-id 1
    python -m store_locator photos --place-id ChIJMZMHeHcjrjsR1vSRgUCbrbc -o photos.json
    python -m store_locator places src/data/stores.ts
    python -m store_locator export-csv -o stores.csv
    python -m store_locator import-csv stores.csv -o stores.json
    python -m store_locator serve --port 8000

The Places commands need GOOGLE_PLACES_API_KEY in the environment.
"""

import argparse
import json
import sys

from . import config
from .config_manager import LocatorConfig
from .csv_io import export_stores_csv, import_stores_file, export_filename
from .data import load_default_stores, load_stores_file
from .exceptions import ConfigurationError, StoreLocatorError
from .extraction import enrich_stores, fetch_store_photos, write_json_report
from .extraction.client import places_client
from .log import configure_logging
from .parsers import extract_store_refs_from_file
from .registry import StoreRegistry


def _banner(title: str):
    print("========================================")
    print(title)
    print("========================================")


def cmd_photos(args, cfg: LocatorConfig) -> int:
    """Fetch up to 10 photos for one store and save the JSON report."""
    api_key = cfg.require_places_key()

    store_id, name, slug, place_id = args.store_id, args.name, args.slug, args.place_id
    if store_id is not None and not place_id:
        store = StoreRegistry(load_default_stores()).get(store_id)
        name = name or store.name
        slug = slug or store.slug
        place_id = store.place_id
    if not place_id:
        raise ConfigurationError("A place id is required (use --place-id or a store with a placeId)")

    if not args.quiet:
        _banner("Google Places Photo Fetcher")
        print(f"\nFetching photos for: {name or place_id}")
        print(f"Place ID: {place_id}\n")

    with places_client(timeout=cfg.request_timeout) as http:
        report = fetch_store_photos(
            store_id=store_id,
            store_name=name,
            slug=slug,
            place_id=place_id,
            api_key=api_key,
            photo_key=cfg.maps_api_key,
            max_photos=cfg.max_photos,
            max_width=cfg.photo_max_width,
            client=http,
        )
    if report is None:
        print("No photos fetched.", file=sys.stderr)
        return 1

    write_json_report(report, args.output)

    if not args.quiet:
        for i, ref in enumerate(report['photoReferences']):
            print(f"  Photo {i+1}: {ref['width']}x{ref['height']}")
        print(f"\nResults saved to: {args.output}")
        print("\nPhoto URLs to add to the store record:")
        print("\nphotos: [")
        for url in report['photos']:
            print(f'    "{url}",')
        print("]")
    return 0


def cmd_places(args, cfg: LocatorConfig) -> int:
    """Resolve every store in a stores module against the Places API."""
    api_key = cfg.require_places_key()

    extraction = extract_store_refs_from_file(args.stores_file)
    if not args.quiet:
        print("Starting to fetch Google Places data for all stores...\n")
        print(f"Found {len(extraction)} stores to process ({extraction.skipped} skipped)\n")

    delay = args.delay if args.delay is not None else cfg.delay_between_stores
    with places_client(timeout=cfg.request_timeout) as http:
        results = enrich_stores(
            extraction.stores,
            api_key,
            delay=delay,
            client=http,
            verbose=not args.quiet,
        )
    write_json_report(results, args.output)

    if not args.quiet:
        print()
        _banner(f"Processed {len(results)} stores\nResults saved to: {args.output}")
        print("\nSummary:")
        for row in results:
            print(f"{row['name']}: {row['placeId']}")
    return 0


def cmd_export_csv(args, cfg: LocatorConfig) -> int:
    stores = load_stores_file(args.stores) if args.stores else load_default_stores()
    text = export_stores_csv(stores)
    output = args.output or export_filename()
    if output == "-":
        print(text)
    else:
        with open(output, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
        if not args.quiet:
            print(f"Exported {len(stores)} stores to {output}")
    return 0


def cmd_import_csv(args, cfg: LocatorConfig) -> int:
    stores = import_stores_file(args.csv_file)
    # Validates id uniqueness the same way the admin import does
    StoreRegistry(stores)
    data = [s.to_dict() for s in stores]
    if args.output:
        write_json_report(data, args.output)
        if not args.quiet:
            print(f"Successfully imported {len(stores)} stores to {args.output}")
    else:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


def cmd_serve(args, cfg: LocatorConfig) -> int:
    from .server import create_app, run_server

    run_server(args.host, args.port, application=create_app(config=cfg))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="store_locator",
        description="Store locator data tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m store_locator photos --store-id 1
  python -m store_locator places src/data/stores.ts -o results.json
  python -m store_locator export-csv -o stores.csv
  python -m store_locator import-csv stores.csv
        """
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress progress output")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help=f"Log level (default: {config.LOG_LEVEL})")
    sub = parser.add_subparsers(dest="command", required=True)

    photos = sub.add_parser("photos", help="Fetch photo URLs for one store")
    photos.add_argument("--place-id", help="Places place ID")
    photos.add_argument("--store-id", type=int, help="Store id in the packaged data")
    photos.add_argument("--name", help="Store name for the report")
    photos.add_argument("--slug", help="Store slug for the report")
    photos.add_argument(
        "-o", "--output",
        default=config.DEFAULT_PHOTOS_OUTPUT,
        help=f"Output JSON file (default: {config.DEFAULT_PHOTOS_OUTPUT})"
    )
    photos.set_defaults(func=cmd_photos)

    places = sub.add_parser("places", help="Look up Places data for every store in a stores module")
    places.add_argument("stores_file", help="TypeScript file containing the STORES array")
    places.add_argument(
        "-o", "--output",
        default=config.DEFAULT_PLACES_OUTPUT,
        help=f"Output JSON file (default: {config.DEFAULT_PLACES_OUTPUT})"
    )
    places.add_argument(
        "-d", "--delay",
        type=float,
        default=None,
        help=f"Seconds between stores (default: {config.DELAY_BETWEEN_STORES})"
    )
    places.set_defaults(func=cmd_places)

    export = sub.add_parser("export-csv", help="Export stores to CSV")
    export.add_argument("--stores", help="JSON store file (default: packaged stores)")
    export.add_argument("-o", "--output", help="CSV path, or - for stdout (default: zecode-stores-<date>.csv)")
    export.set_defaults(func=cmd_export_csv)

    imp = sub.add_parser("import-csv", help="Parse a stores CSV into JSON")
    imp.add_argument("csv_file", help="CSV file to import")
    imp.add_argument("-o", "--output", help="Output JSON file (default: stdout)")
    imp.set_defaults(func=cmd_import_csv)

    serve = sub.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", default=config.API_HOST)
    serve.add_argument("--port", type=int, default=config.API_PORT)
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    cfg = LocatorConfig(log_level=args.log_level)

    try:
        return args.func(args, cfg)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        if config.PLACES_API_KEY_ENV in str(e):
            print(f'Set it with: export {config.PLACES_API_KEY_ENV}="your-api-key"', file=sys.stderr)
        return 1
    except (StoreLocatorError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
