#Purpose: The Directions "adapter/client".
#Sole responsibility: talk to the Google Directions web service via HTTP and
#return the raw route list.
#Encapsulates Directions-specific details:
#origin/destination formatting ("lat,lng" or a place name passed verbatim)
#URL construction and the API key
#timeouts and error handling
#mapping the response "status" field onto routes / errors
#It should not decode polylines or build trajectories.


from dotenv import load_dotenv
import logging
import os
from typing import Any, Dict, List, Optional, Sequence, Union
import requests

from simulation.models import GeoPoint

# Read the API key and endpoint from environment
# Example in .env:
# MAPS_API_KEY=AIza...
# DIRECTIONS_BASE_URL=https://maps.googleapis.com
# DIRECTIONS_TIMEOUT=10
load_dotenv()
MAPS_API_KEY = os.getenv("MAPS_API_KEY")
BASE_URL = os.getenv("DIRECTIONS_BASE_URL", "https://maps.googleapis.com")
DEFAULT_TIMEOUT = float(os.getenv("DIRECTIONS_TIMEOUT", "10"))

logger = logging.getLogger(__name__)

# A place is either a free-form address/place name or a coordinate
Place = Union[str, GeoPoint, Dict[str, Any], Sequence[float]]

# statuses that mean "the request was fine, there is just no route"
EMPTY_STATUSES = {"ZERO_RESULTS", "NOT_FOUND"}


class CollaboratorError(Exception):
    """Network, authentication or quota failure talking to the Directions service."""
    pass


class DirectionsClient:
    """
    Directions Adapter / Client

    Sole responsibility:
    - Talk to the Directions service via HTTP
    - Convert internal places -> Directions query strings
    - Return the list of routes exactly as the service sent them

    """
    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.api_key = api_key or MAPS_API_KEY
        self.base_url = (base_url or BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT #seconds to wait for the service before giving up
        self.session = session or requests.Session()

        if not self.api_key:
            raise ValueError("Directions API key not set. Please set MAPS_API_KEY in the .env file.")

    #----------------
    # Internal helpers
    #----------------
    def format_place(self, place: Place) -> str:
        """Strings pass through untouched, coordinates become 'lat,lng'."""
        if isinstance(place, str):
            return place
        point = GeoPoint.from_value(place)
        return f"{point.lat},{point.lng}"

    def redact(self, text: str) -> str:
        """Mask the API key wherever it shows up in `text`."""
        return text.replace(self.api_key, "***")

    #----------------
    # Public methods
    #----------------
    def fetch_routes(self, origin: Place, destination: Place) -> List[Dict[str, Any]]:
        """
        Calls the Directions endpoint once for origin -> destination.

        Returns:
            the "routes" list from the response; each route carries
            route["overview_polyline"]["points"] (encoded path).
            Empty list when the service reports no route.

        Raises:
            CollaboratorError: transport failure, HTTP error, unparseable body,
                or any non-OK status (REQUEST_DENIED, OVER_QUERY_LIMIT, ...).
        """
        url = f"{self.base_url}/maps/api/directions/json"
        params = {
            "origin": self.format_place(origin),
            "destination": self.format_place(destination),
            "key": self.api_key,
        }

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            # the exception text carries the full query URL, key included
            logger.error(f"Directions request failed: {e.__class__.__name__}: {self.redact(str(e))}")
            raise CollaboratorError(f"Directions request failed: {e.__class__.__name__}") from e
        except ValueError as e:
            logger.error(f"Directions returned a non-JSON body: {e}")
            raise CollaboratorError("Directions returned a non-JSON body") from e

        status = data.get("status")
        if status in EMPTY_STATUSES:
            return []

        if status != "OK":
            message = data.get("error_message", "Unknown error")
            logger.error(f"Directions error: status={status} message={message}")
            raise CollaboratorError(f"Directions error: {status}: {message}")

        return data.get("routes", [])
