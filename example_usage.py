"""Example usage of the SST retrieval system."""

import logging
from bbh.domain.exceptions import SSTError
from bbh.presentation.cli.main import build_service

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    service = build_service(root="data")

    # Example 1: Boothbay Harbor daily data
    print("=" * 60)
    print("Example 1: Boothbay Harbor")
    print("=" * 60)
    try:
        bbh = service.fetch_sst("BBH")
        print(f"\n{bbh.provenance.long_name}: {len(bbh)} days")
        print(bbh.data.tail())
    except SSTError as e:
        logger.error(f"BBH fetch failed: {e}", exc_info=True)
        return

    # Example 2: Buoy E01, hourly then daily
    print("\n" + "=" * 60)
    print("Example 2: Buoy E01, July 2021")
    print("=" * 60)
    try:
        hourly = service.fetch_e01(begin="2021-07-01", end="2021-07-31", form="hourly")
        daily = service.e01_bydate(hourly)
        print(f"\n{len(hourly)} readings -> {len(daily)} days")
        for summary in daily.to_summaries()[:5]:
            print(
                f"  {summary.collection_date}: min={summary.temp_min} "
                f"max={summary.temp_max} mean={summary.temp_avg}"
            )
        print(f"\nSaved to {service.save(daily)}")
    except SSTError as e:
        logger.error(f"E01 fetch failed: {e}", exc_info=True)


if __name__ == "__main__":
    main()
