import math

from django.conf import settings
from rest_framework import serializers


class ExpressionSerializer(serializers.Serializer):
    """Serializer for an RPN expression submitted for conversion or evaluation."""
    # Whitespace is significant to the tokenizer, so the text is passed on untouched.
    expression = serializers.CharField(
        trim_whitespace=False,
        max_length=settings.RPN_MAX_EXPRESSION_LENGTH,
    )


class ValidationRequestSerializer(ExpressionSerializer):
    """Serializer for validity checks, where a blank expression is simply invalid."""
    expression = serializers.CharField(
        trim_whitespace=False,
        allow_blank=True,
        max_length=settings.RPN_MAX_EXPRESSION_LENGTH,
    )


class ConversionSerializer(serializers.Serializer):
    """Serializer for the infix form of an expression."""
    expression = serializers.CharField()
    infix = serializers.CharField()


class EvaluationSerializer(ConversionSerializer):
    """Serializer for an evaluated expression."""
    result = serializers.SerializerMethodField()
    display = serializers.CharField()

    def get_result(self, obj):
        """Return the numeric result, or None when it is not a finite number."""
        result = obj["result"]
        return result if math.isfinite(result) else None
