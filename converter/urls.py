from django.urls import path
from .views import ValidateExpressionAPIView, ConvertExpressionAPIView, EvaluateExpressionAPIView


urlpatterns = [
    path("validate/", ValidateExpressionAPIView.as_view(), name="rpn-validate"),
    path("convert/", ConvertExpressionAPIView.as_view(), name="rpn-convert"),
    path("evaluate/", EvaluateExpressionAPIView.as_view(), name="rpn-evaluate"),
]
