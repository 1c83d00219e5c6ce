import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .dsl import (
    render_infix, evaluate,
    ExpressionArgumentError, LexicalError, StructuralError, DivisionByZeroError,
)
from .serializers import (
    ExpressionSerializer, ValidationRequestSerializer,
    ConversionSerializer, EvaluationSerializer,
)
from .utils import build_tree, is_valid_rpn, convert_to_infix, format_result

logger = logging.getLogger(__name__)

USER_ERRORS = (ExpressionArgumentError, LexicalError, StructuralError, DivisionByZeroError)


def error_response(expression, error):
    """Build the 400 response for an expression the user got wrong."""
    logger.info(f"Rejected expression {expression!r}: {error}")
    return Response(
        {"status": 400, "message": str(error)},
        status=status.HTTP_400_BAD_REQUEST
    )


class ValidateExpressionAPIView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = ValidationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        expression = serializer.validated_data["expression"]
        data = {"expression": expression, "is_valid": is_valid_rpn(expression)}
        return Response({"status": 200, "data": data}, status=status.HTTP_200_OK)


class ConvertExpressionAPIView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = ExpressionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        expression = serializer.validated_data["expression"]
        try:
            infix = convert_to_infix(expression)
        except USER_ERRORS as e:
            return error_response(expression, e)

        data = ConversionSerializer({"expression": expression, "infix": infix}).data
        return Response({"status": 200, "data": data}, status=status.HTTP_200_OK)


class EvaluateExpressionAPIView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = ExpressionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        expression = serializer.validated_data["expression"]
        try:
            tree = build_tree(expression)
            infix = render_infix(tree)
            result = evaluate(tree)
        except USER_ERRORS as e:
            return error_response(expression, e)

        data = EvaluationSerializer({
            "expression": expression,
            "infix": infix,
            "result": result,
            "display": format_result(result),
        }).data
        return Response({"status": 200, "data": data}, status=status.HTTP_200_OK)
