from rest_framework import serializers


class SimulationStepSerializer(serializers.Serializer):
    lat = serializers.FloatField()
    lng = serializers.FloatField()
    timestamp = serializers.IntegerField(source='timestamp_ms')


class SimulationResultSerializer(serializers.Serializer):
    """
    Wire shape of a SimulationResult:
    {"totalDurationSeconds": int, "steps": [{"lat", "lng", "timestamp"}]}
    """
    totalDurationSeconds = serializers.IntegerField(source='total_duration_seconds')
    steps = SimulationStepSerializer(many=True)
