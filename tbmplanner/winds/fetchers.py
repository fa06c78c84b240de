# tbmplanner/winds/fetchers.py
"""
HTTP clients for the two wind providers. They only move text; decoding is
delegated to the decoders and every failure degrades to "no wind data".
"""
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime
from typing import Dict, List, Optional

import requests
import requests_cache
from retry_requests import retry

from ..constants.services import ServiceEndpoints, ServiceLimits
from ..route.utils.coordinates import route_waypoints
from .constants import WindConstants
from .data_models import RouteWindData, WindProfile
from .exceptions import PlanCancelledError, WindFetchError, WindParseError
from .gridded_decoder import (build_point_query_url, decode_point_response, forecast_time_index,
                              grid_lat_index, grid_lon_index, is_error_page, select_model_cycle)
from .route_winds import build_gridded_route_winds
from .station_decoder import parse_bulletin

def _check_cancelled(cancel_event: Optional[threading.Event]):
    if cancel_event is not None and cancel_event.is_set():
        raise PlanCancelledError("Planning session was cancelled during wind fetch")

class StationBulletinClient:
    """Fetches the FB winds station bulletin for a forecast horizon."""

    def __init__(self, url: str = ServiceEndpoints.WINDS_BULLETIN_URL,
                 timeout: int = ServiceLimits.REQUEST_TIMEOUT_SEC,
                 session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        if session is None:
            cache_session = requests_cache.CachedSession('tbmplanner_winds', backend='memory', expire_after=3600)
            session = retry(cache_session, retries=ServiceLimits.HTTP_RETRIES,
                            backoff_factor=ServiceLimits.HTTP_BACKOFF_FACTOR)
        self.session = session
        logging.info(f"StationBulletinClient initialized for {self.url}")

    def fetch(self, forecast_hour: str = "06") -> Optional[str]:
        """
        Returns the raw bulletin text, or None if the provider could not be reached.

        Raises:
            WindFetchError: for a forecast horizon the bulletin does not offer.
        """
        if forecast_hour not in WindConstants.BULLETIN_FORECAST_HOURS:
            raise WindFetchError(f"Unsupported forecast horizon '{forecast_hour}' "
                                 f"(expected one of {', '.join(WindConstants.BULLETIN_FORECAST_HOURS)})")
        params = dict(ServiceEndpoints.WINDS_BULLETIN_PARAMS, fcst=forecast_hour)
        try:
            logging.info(f"Fetching {forecast_hour}h winds bulletin...")
            response = self.session.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logging.error(f"Failed to fetch winds bulletin: {e}")
            return None
        return response.text

    def fetch_profiles(self, forecast_hour: str = "06", cache: Optional[Dict] = None) -> Optional[Dict[str, WindProfile]]:
        """Fetched and decoded station profiles, memoized in `cache` when one is given."""
        key = f"bulletin:{forecast_hour}"
        if cache is not None and key in cache:
            return cache[key]
        text = self.fetch(forecast_hour)
        if text is None:
            return None
        profiles = parse_bulletin(text)
        if cache is not None:
            cache[key] = profiles
        return profiles

class GriddedWindClient:
    """
    Fetches model winds at evenly spaced route samples. Requests go out in
    fixed-size concurrent batches with a pause between batches; every request
    has its own timeout. Failed points get exactly one serial retry.
    """

    def __init__(self, base_url: str = ServiceEndpoints.GFS_DODS_BASE_URL,
                 timeout: float = ServiceLimits.REQUEST_TIMEOUT_SEC,
                 batch_size: int = ServiceLimits.GFS_BATCH_SIZE,
                 batch_delay_sec: float = ServiceLimits.GFS_BATCH_DELAY_SEC,
                 retry_delay_sec: float = ServiceLimits.GFS_RETRY_DELAY_SEC,
                 retry_spacing_sec: float = ServiceLimits.GFS_RETRY_SPACING_SEC,
                 num_segments: int = 20,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url
        self.timeout = timeout
        self.batch_size = max(1, batch_size)
        self.batch_delay_sec = batch_delay_sec
        self.retry_delay_sec = retry_delay_sec
        self.retry_spacing_sec = retry_spacing_sec
        self.num_segments = num_segments
        self.session = session or requests.Session()
        logging.info(f"GriddedWindClient initialized. Batch size: {self.batch_size}, timeout: {self.timeout}s")

    def fetch_route_winds(self, dep_lat: float, dep_lon: float, dest_lat: float, dest_lon: float,
                          valid_time: Optional[datetime] = None, now_utc: Optional[datetime] = None,
                          cancel_event: Optional[threading.Event] = None,
                          cache: Optional[Dict] = None) -> Optional[RouteWindData]:
        """
        Returns route winds for the current model cycle, or None when no sample
        point could be fetched.

        Raises:
            PlanCancelledError: if `cancel_event` is set before results are accepted.
        """
        cycle = select_model_cycle(now_utc)
        time_index = forecast_time_index(cycle.start, valid_time)
        waypoints = route_waypoints(dep_lat, dep_lon, dest_lat, dest_lon, self.num_segments)
        urls = [build_point_query_url(self.base_url, cycle, time_index, grid_lat_index(lat), grid_lon_index(lon))
                for lat, lon, _ in waypoints]
        logging.info(f"Fetching model winds for {len(urls)} route points (cycle {cycle.label}, t={time_index}).")

        profiles: List[Optional[WindProfile]] = [None] * len(urls)
        failed: List[int] = []
        for batch_start in range(0, len(urls), self.batch_size):
            _check_cancelled(cancel_event)
            if batch_start > 0 and self.batch_delay_sec > 0:
                time.sleep(self.batch_delay_sec)
            batch = range(batch_start, min(batch_start + self.batch_size, len(urls)))
            with ThreadPoolExecutor(max_workers=self.batch_size) as executor:
                futures = {executor.submit(self._fetch_point, urls[i], cache): i for i in batch}
                for future in as_completed(futures):
                    index = futures[future]
                    profile = future.result()
                    if profile is None:
                        failed.append(index)
                    else:
                        profiles[index] = profile

        if failed:
            logging.warning(f"{len(failed)} wind points failed, retrying once.")
            if self.retry_delay_sec > 0:
                time.sleep(self.retry_delay_sec)
            for n, index in enumerate(sorted(failed)):
                _check_cancelled(cancel_event)
                if n > 0 and self.retry_spacing_sec > 0:
                    time.sleep(self.retry_spacing_sec)
                profiles[index] = self._fetch_point(urls[index], cache)

        _check_cancelled(cancel_event)
        samples = [(lat, lon, dist, profiles[i]) for i, (lat, lon, dist) in enumerate(waypoints)]
        route_winds = build_gridded_route_winds(samples, waypoints[-1][2], cycle.label)
        if route_winds is None:
            logging.error("No model wind points could be fetched for the route.")
            return None
        logging.info(f"Model winds ready: {len(route_winds.points)}/{len(urls)} points "
                     f"({route_winds.failed_points} without data).")
        return route_winds

    def _fetch_point(self, url: str, cache: Optional[Dict]) -> Optional[WindProfile]:
        if cache is not None and url in cache:
            return cache[url]
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logging.warning(f"Model wind request failed: {e}")
            return None
        if is_error_page(response.text):
            logging.warning(f"Model wind server returned an error page for {url}")
            return None
        try:
            profile = decode_point_response(response.text)
        except WindParseError as e:
            logging.warning(f"Could not decode model wind response: {e}")
            return None
        if cache is not None:
            cache[url] = profile
        return profile
