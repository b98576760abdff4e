#Marks routing as a package.
#Re-exports the Directions client and its error so other modules import from
#routing without knowing internal file names.
#No business logic.

from .directions_client import DirectionsClient, CollaboratorError

__all__ = [
           "DirectionsClient",
           "CollaboratorError",
           ]
