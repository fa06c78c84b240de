# tbmplanner/fuel_stops/pricing.py
"""
Fuel price collaborator client. Given an airport code the provider returns
{"fbo", "retailPrice", "memberPrice"} or an empty document for "no data".
"""
import json
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, Optional

import requests
import requests_cache
from retry_requests import retry

from ..constants.services import ServiceEndpoints, ServiceLimits
from .data_models import FuelPrice

def _to_price(value) -> Optional[float]:
    if value is None:
        return None
    try:
        price = float(str(value).replace('$', '').strip())
    except ValueError:
        return None
    return price if price > 0 else None

def parse_price(ident: str, data: Optional[Dict]) -> Optional[FuelPrice]:
    if not data:
        return None
    retail = _to_price(data.get('retailPrice'))
    member = _to_price(data.get('memberPrice'))
    if retail is None and member is None:
        return None
    return FuelPrice(
        ident=ident.upper(),
        fbo=data.get('fbo') or '',
        retail_price=retail,
        member_price=member,
        source="member" if member is not None else "retail",
    )

class FuelPriceClient:
    """Per-airport Jet-A price lookups, concurrent across airports."""

    def __init__(self, url: str = ServiceEndpoints.FUEL_PRICE_URL,
                 timeout: int = ServiceLimits.REQUEST_TIMEOUT_SEC,
                 max_workers: int = ServiceLimits.FUEL_PRICE_WORKERS,
                 session: Optional[requests.Session] = None):
        self.url = url.rstrip('/')
        self.timeout = timeout
        self.max_workers = max_workers
        if session is None:
            cache_session = requests_cache.CachedSession('tbmplanner_fuel', backend='memory', expire_after=3600)
            session = retry(cache_session, retries=ServiceLimits.HTTP_RETRIES,
                            backoff_factor=ServiceLimits.HTTP_BACKOFF_FACTOR)
        self.session = session

    def lookup(self, ident: str) -> Optional[FuelPrice]:
        """Price for one airport, or None for no data or an unreachable provider."""
        try:
            response = self.session.get(f"{self.url}/{ident.upper()}", timeout=self.timeout)
            if response.status_code == 404:
                return None
            response.raise_for_status()
            return parse_price(ident, response.json())
        except requests.exceptions.RequestException as e:
            logging.error(f"Fuel price lookup failed for {ident}: {e}")
            return None
        except json.JSONDecodeError as e:
            logging.error(f"Fuel price response for {ident} was not JSON: {e}")
            return None

    def lookup_many(self, idents: Iterable[str], cache: Optional[Dict[str, Optional[FuelPrice]]] = None) -> Dict[str, Optional[FuelPrice]]:
        """
        Looks up every airport concurrently. Each result lands in its own
        key of `cache` (when given), so no locking is needed.
        """
        idents = list(idents)
        cache = {} if cache is None else cache
        pending = [i.upper() for i in dict.fromkeys(idents) if i.upper() not in cache]
        if pending:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                for ident, price in zip(pending, executor.map(self.lookup, pending)):
                    cache[ident] = price
            found = sum(1 for i in pending if cache[i] is not None)
            logging.info(f"Fuel prices: {found}/{len(pending)} airports returned data.")
        return {i.upper(): cache.get(i.upper()) for i in idents}
