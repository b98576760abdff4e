from django.urls import path
from simulator_api.views import SimulateRouteView

urlpatterns = [
    path('simulate-route', SimulateRouteView.as_view(), name='simulate-route'),
]
