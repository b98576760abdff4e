from django.apps import AppConfig


class SimulatorApiConfig(AppConfig):
    name = 'simulator_api'
