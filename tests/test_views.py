"""Tests for the RPN HTTP endpoints."""

import pytest
from django.urls import reverse
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


def post(api_client, name, payload):
    return api_client.post(reverse(name), payload, format="json")


@pytest.mark.parametrize("expr,expected", [
    ("3 4 +", True),
    ("5 0 /", True),
    ("3 4", False),
    ("3 +", False),
    ("3 x +", False),
    ("", False),
    ("   ", False),
])
def test_validate(api_client, expr, expected):
    response = post(api_client, "rpn-validate", {"expression": expr})
    assert response.status_code == 200
    assert response.data["status"] == 200
    assert response.data["data"] == {"expression": expr, "is_valid": expected}


def test_convert(api_client):
    response = post(api_client, "rpn-convert", {"expression": "3 4 + 2 *"})
    assert response.status_code == 200
    assert response.data["data"] == {"expression": "3 4 + 2 *", "infix": "((3 + 4) * 2)"}


def test_convert_keeps_negative_literal(api_client):
    response = post(api_client, "rpn-convert", {"expression": "-3 4 +"})
    assert response.data["data"]["infix"] == "(-3 + 4)"


@pytest.mark.parametrize("expr,fragment", [
    ("3 x +", "'x'"),
    ("3 +", "need 2 operands, have 1"),
    ("3 4", "2 items left on the stack"),
    ("   ", "expression is required"),
])
def test_convert_rejects_bad_expressions(api_client, expr, fragment):
    response = post(api_client, "rpn-convert", {"expression": expr})
    assert response.status_code == 400
    assert response.data["status"] == 400
    assert fragment in response.data["message"]


def test_evaluate(api_client):
    response = post(api_client, "rpn-evaluate", {"expression": "15 7 1 1 + - / 3 * 2 1 1 + + -"})
    assert response.status_code == 200
    data = response.data["data"]
    assert data["result"] == 5.0
    assert data["display"] == "5"
    assert data["infix"] == "(((15 / (7 - (1 + 1))) * 3) - (2 + (1 + 1)))"


def test_evaluate_fraction(api_client):
    response = post(api_client, "rpn-evaluate", {"expression": "7 2 /"})
    assert response.data["data"]["result"] == 3.5
    assert response.data["data"]["display"] == "3.5"


def test_evaluate_division_by_zero(api_client):
    response = post(api_client, "rpn-evaluate", {"expression": "5 0 /"})
    assert response.status_code == 400
    assert "zero" in response.data["message"]


def test_evaluate_overflow_has_no_numeric_result(api_client):
    big = "1" + "0" * 200
    response = post(api_client, "rpn-evaluate", {"expression": f"{big} {big} *"})
    assert response.status_code == 200
    assert response.data["data"]["result"] is None
    assert response.data["data"]["display"] == "inf"


@pytest.mark.parametrize("name", ["rpn-convert", "rpn-evaluate"])
def test_blank_expression_is_rejected_by_serializer(api_client, name):
    response = post(api_client, name, {"expression": ""})
    assert response.status_code == 400
    assert "expression" in response.data


@pytest.mark.parametrize("name", ["rpn-validate", "rpn-convert", "rpn-evaluate"])
def test_missing_expression(api_client, name):
    response = post(api_client, name, {})
    assert response.status_code == 400
    assert "expression" in response.data


def test_expression_too_long(api_client):
    response = post(api_client, "rpn-evaluate", {"expression": "1 " * 600})
    assert response.status_code == 400
    assert "expression" in response.data


def test_get_not_allowed(api_client):
    response = api_client.get(reverse("rpn-convert"))
    assert response.status_code == 405


@pytest.mark.parametrize("expr,fragment", [
    ("   ", "expression is required"),
    ("3 x +", "'x'"),
    ("3 4", "2 items left on the stack"),
])
def test_evaluate_rejects_bad_expressions(api_client, expr, fragment):
    response = post(api_client, "rpn-evaluate", {"expression": expr})
    assert response.status_code == 400
    assert fragment in response.data["message"]


def test_evaluate_display_matches_result(api_client):
    response = post(api_client, "rpn-evaluate", {"expression": "0.1 0.2 +"})
    data = response.data["data"]
    assert data["infix"] == "(0.1 + 0.2)"
    assert data["display"] == "0.30000000000000004"
    assert float(data["display"]) == data["result"]
