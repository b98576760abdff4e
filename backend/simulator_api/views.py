import logging

from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from routing import CollaboratorError, DirectionsClient
from simulation import (
    DecodeError,
    NoRouteFoundError,
    RouteSimulationService,
    ValidationError,
)
from simulation.service import validate_request
from .serializers import SimulationResultSerializer

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred while processing the route."


class SimulateRouteView(APIView):
    """
    POST /simulate-route
    Body: {"origin": ..., "destination": ..., "speedKmh": number}
    - 200: {"totalDurationSeconds", "steps"}
    - 400: missing/invalid input
    - 404: no route between origin and destination
    - 500: anything else (collaborator failure, bad polyline, bugs)
    """
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def get_service(self) -> RouteSimulationService:
        """
        Build a fresh service per request. Tests override this to inject a fake collaborator.
        """
        return RouteSimulationService(DirectionsClient())

    def post(self, request):
        data = request.data if isinstance(request.data, dict) else {}
        origin = data.get('origin')
        destination = data.get('destination')
        speed_kmh = data.get('speedKmh')

        try:
            # bad input is rejected before a Directions client is even built
            validate_request(origin, destination, speed_kmh)
            service = self.get_service()
            result = service.simulate(origin, destination, speed_kmh)
        except ValidationError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except NoRouteFoundError as e:
            return Response({"error": str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (CollaboratorError, DecodeError) as e:
            # details stay in the server log only
            logger.error(f"Route simulation failed: {e}")
            return Response({"error": GENERIC_ERROR}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        except Exception:
            logger.exception("Unexpected error while simulating route")
            return Response({"error": GENERIC_ERROR}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(SimulationResultSerializer(result).data)
