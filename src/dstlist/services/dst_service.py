"""Client for the dstlist service."""

from typing import Callable, List, Optional

from dstlist.auth import AuthenticationOptions
from dstlist.errors import InvalidArgument
from dstlist.models.dst import DaylightSavingTime, DstFilter, DstQueryOptions
from dstlist.parsing.dst_mapper import map_dst_list
from dstlist.retrieval.arguments import assemble_arguments
from dstlist.retrieval.transport import HttpTransport
from dstlist.config.settings import ServiceSettings
from dstlist.utils.logging import get_logger
from dstlist.utils.uri import build_service_url
from dstlist.utils.xml import check_for_errors

logger = get_logger(__name__)

SERVICE_NAME = "dstlist"


class DSTService:
    """
    Query daylight saving time data for all supported countries.

    Results are aggregated on country/timezone level: eventual start and end
    of DST and the UTC offsets around it. By default only countries that
    observe DST are returned, and affected places are listed per entry. See
    ``include_only_dst_countries`` and ``include_places_for_every_country``.
    """

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        *,
        settings: Optional[ServiceSettings] = None,
        options: Optional[DstQueryOptions] = None,
        signed: bool = True,
        transport_factory: Optional[Callable[[ServiceSettings], HttpTransport]] = None,
    ):
        self.authentication = AuthenticationOptions(access_key, secret_key, signed=signed)
        self.settings = settings or ServiceSettings()
        self.options = options or DstQueryOptions()
        self._transport_factory = transport_factory or _default_transport

    @property
    def service_name(self) -> str:
        return SERVICE_NAME

    # Query toggles, settable between calls

    @property
    def include_time_changes(self) -> bool:
        return self.options.include_time_changes

    @include_time_changes.setter
    def include_time_changes(self, value: bool) -> None:
        self.options.include_time_changes = value

    @property
    def include_only_dst_countries(self) -> bool:
        return self.options.include_only_dst_countries

    @include_only_dst_countries.setter
    def include_only_dst_countries(self, value: bool) -> None:
        self.options.include_only_dst_countries = value

    @property
    def include_places_for_every_country(self) -> bool:
        return self.options.include_places_for_every_country

    @include_places_for_every_country.setter
    def include_places_for_every_country(self, value: bool) -> None:
        self.options.include_places_for_every_country = value

    # Retrieval

    def get_daylight_saving_time(self) -> List[DaylightSavingTime]:
        """Get entries for all countries for the current year."""
        return self._retrieve_dst_list()

    def get_daylight_saving_time_by_country(self, country_code: Optional[str]) -> List[DaylightSavingTime]:
        """
        Get entries for one country, including countries without DST.

        Args:
            country_code: ISO 3166-1 alpha-2 country code

        Raises:
            InvalidArgument: If country_code is None or empty
        """
        if not _valid_country(country_code):
            raise InvalidArgument("A required argument is null or empty: country_code")
        return self._retrieve_dst_list(DstFilter(country=country_code.strip()), force_all_countries=True)

    def get_daylight_saving_time_by_year(self, year: Optional[int]) -> List[DaylightSavingTime]:
        """
        Get entries for a year. ``include_only_dst_countries`` applies as configured.

        Raises:
            InvalidArgument: If year is missing or not a positive integer
        """
        if not _valid_year(year):
            raise InvalidArgument(f"Year must be a positive integer, got {year!r}")
        return self._retrieve_dst_list(DstFilter(year=year))

    def get_daylight_saving_time_by_country_and_year(
        self,
        country_code: Optional[str],
        year: Optional[int],
    ) -> List[DaylightSavingTime]:
        """
        Get entries for a country and year, including countries without DST.

        A partial filter is accepted: an invalid part is left out of the query.

        Raises:
            InvalidArgument: If both country_code and year are missing or invalid
        """
        has_country = _valid_country(country_code)
        has_year = _valid_year(year)
        if not has_country and not has_year:
            raise InvalidArgument("A required argument is null or empty: country_code and year")

        return self._retrieve_dst_list(
            DstFilter(
                country=country_code.strip() if has_country else None,
                year=year if has_year else None,
            ),
            force_all_countries=True,
        )

    def _retrieve_dst_list(
        self,
        filters: Optional[DstFilter] = None,
        *,
        force_all_countries: bool = False,
    ) -> List[DaylightSavingTime]:
        arguments = assemble_arguments(
            self.settings,
            self.options,
            self.authentication,
            self.service_name,
            filters,
            force_all_countries=force_all_countries,
        )
        url = build_service_url(self.settings.entry_point, self.service_name, arguments)

        logger.info(
            f"Querying {self.service_name} "
            f"(country={filters.country if filters else None}, year={filters.year if filters else None})"
        )
        with self._transport_factory(self.settings) as transport:
            payload = transport.get_text(url)
            validated = check_for_errors(payload)
            records = map_dst_list(validated)

        logger.info(f"Received {len(records)} DST entries")
        return records


def _default_transport(settings: ServiceSettings) -> HttpTransport:
    return HttpTransport(timeout_seconds=settings.timeout_seconds, user_agent=settings.user_agent)


def _valid_country(country_code: Optional[str]) -> bool:
    return isinstance(country_code, str) and bool(country_code.strip())


def _valid_year(year: Optional[int]) -> bool:
    return isinstance(year, int) and not isinstance(year, bool) and year > 0
