from rest_framework import serializers

from .services import QuoteDecision


# Input serializers

class QuestionInputSerializer(serializers.Serializer):
    question = serializers.CharField(
        required=False,
        allow_blank=True,
        default='',
        help_text="Question about the pending quote",
    )


# Response serializers for API documentation

class DecisionResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    action = serializers.ChoiceField(choices=QuoteDecision.choices)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
