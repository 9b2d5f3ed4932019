"""CLI interface for Maine SST retrieval."""

import argparse
import logging
import sys
from datetime import date

from ...application.services.sst_service import SSTService
from ...domain.entities.dataset import Dataset, Form
from ...domain.exceptions import SSTError
from ...domain.use_cases.build_buoy_uri import BuildBuoyUriUseCase
from ...infrastructure.repositories.arcgis_portal_repository import ArcGISPortalRepository
from ...infrastructure.repositories.neracoos_buoy_repository import NeracoosBuoyRepository
from ...infrastructure.repositories.file_sst_repository import FileSSTRepository

from config.settings import (
    BBH_URI,
    BBH_TIMEZONE,
    BBH_DATE_FORMAT,
    E01_URI_TEMPLATE,
    E01_DEFAULT_BEGIN,
    DATA_ROOT,
    HTTP_TIMEOUT,
    PROVENANCE,
)

logger = logging.getLogger(__name__)


def build_service(root=None) -> SSTService:
    """Wire repositories into an SSTService."""
    return SSTService(
        portal_repo=ArcGISPortalRepository(BBH_URI, timeout=HTTP_TIMEOUT),
        buoy_repo=NeracoosBuoyRepository(E01_URI_TEMPLATE, timeout=HTTP_TIMEOUT),
        provenance=PROVENANCE,
        default_begin=E01_DEFAULT_BEGIN,
        portal_timezone=BBH_TIMEZONE,
        portal_date_format=BBH_DATE_FORMAT,
        table_repo=FileSSTRepository(root) if root else None,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maine sea surface temperature data")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === fetch: download a dataset and save it as CSV ===
    fetch_parser = subparsers.add_parser("fetch", help="Fetch a dataset and save it as CSV")
    fetch_parser.add_argument(
        "--name",
        type=str,
        default=Dataset.BBH.value,
        help="Dataset name: bbh or e01 (case-insensitive)",
    )
    fetch_parser.add_argument(
        "--form",
        type=str,
        default=Form.DAILY.value,
        choices=[f.value for f in Form],
        help="Granularity (E01 only)",
    )
    fetch_parser.add_argument("--begin", type=str, default=None, help="E01 start date, YYYY-mm-dd")
    fetch_parser.add_argument("--end", type=str, default=None, help="E01 end date, YYYY-mm-dd")
    fetch_parser.add_argument(
        "--root",
        type=str,
        default=DATA_ROOT,
        help="Directory to save into (default: $BBH_DATA_ROOT)",
    )
    fetch_parser.add_argument(
        "--output", type=str, default=None, help="File name under the root"
    )

    # === uri: print the E01 query URI ===
    uri_parser = subparsers.add_parser("uri", help="Print the E01 query URI for a date range")
    uri_parser.add_argument("--begin", type=str, default=E01_DEFAULT_BEGIN)
    uri_parser.add_argument("--end", type=str, default=date.today().isoformat())

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # === Command: uri ===
    if args.command == "uri":
        try:
            print(BuildBuoyUriUseCase(E01_URI_TEMPLATE).execute(args.begin, args.end))
        except SSTError as e:
            logger.error(str(e))
            return 1
        return 0

    # === Command: fetch ===
    if not args.root:
        logger.error("No data root given; pass --root or set BBH_DATA_ROOT")
        return 1

    try:
        service = build_service(args.root)
        table = service.fetch_sst(args.name, form=args.form, begin=args.begin, end=args.end)
        path = service.save(table, args.output)
    except SSTError as e:
        logger.error(f"Fetch failed: {e}")
        return 1

    print(f"{table} saved to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
