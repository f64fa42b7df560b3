"""
Tests for contracts: explicit name -> value binding, reports, enforcement,
and the checked decorator.
"""

import pytest
from structlog.testing import capture_logs

from typecontracts import Contract, ContractReport, checked, typecheck
from typecontracts.errors import ConfigurationError, ContractViolation, ErrorCode


@pytest.fixture
def contract(t):
    return Contract(count=t.integer(minimum=0), name=t.string(regex=r"^\w+$"), unit=t.one_of("m", "s"))


class TestEvaluate:
    def test_all_bindings_pass(self, contract):
        report = contract.evaluate({"count": 3, "name": "widget", "unit": "m"})
        assert report.ok
        assert bool(report) is True
        assert report.failures == ()

    def test_report_keeps_every_failure(self, contract):
        report = contract.evaluate({"count": -1, "name": "widget", "unit": "kg"})
        assert not report.ok
        assert [b.name for b in report.failures] == ["count", "unit"]
        assert report.reasons == {
            "count": ("-1 is less than minimum 0",),
            "unit": ("expected 'm', got 'kg'", "expected 's', got 'kg'"),
        }

    def test_unbound_name_fails(self, contract):
        report = contract.evaluate({"count": 1, "name": "x"})
        assert report.reasons == {"unit": ("unit is not bound",)}
        unit = report.failures[0]
        assert not unit.bound

    def test_extra_values_are_ignored(self, contract):
        assert contract.evaluate({"count": 1, "name": "x", "unit": "s", "other": object()}).ok

    def test_bindings_are_triples_in_declaration_order(self, contract):
        report = contract.evaluate({"count": 1, "name": "x", "unit": "s"})
        assert [(b.name, b.value) for b in report.bindings] == [("count", 1), ("name", "x"), ("unit", "s")]
        assert all(b.result.is_success() for b in report.bindings)

    def test_to_dict(self, contract):
        data = contract.evaluate({"count": "3", "name": "x", "unit": "s"}).to_dict()
        assert data["ok"] is False
        assert data["bindings"]["count"] == {"success": False, "reasons": ["expected int, got str"]}
        assert data["bindings"]["unit"] == {"success": True}

    def test_mapping_and_keyword_declarations_merge(self, t):
        contract = Contract({"a": t.integer()}, b=t.string())
        assert list(contract.declarations) == ["a", "b"]

    def test_origin_is_an_ordinary_declaration(self, t):
        contract = Contract(origin=t.integer())
        assert list(contract.declarations) == ["origin"]
        assert contract.origin == "contract"
        assert contract.evaluate({"origin": 1}).ok
        assert contract.evaluate({"origin": "not an int"}).reasons == {"origin": ("expected int, got str",)}

    def test_labelled_contract(self, t):
        contract = Contract.at("import_rows", {"origin": t.string()})
        assert contract.origin == "import_rows"
        with pytest.raises(ContractViolation) as exc_info:
            contract.enforce({"origin": 3})
        assert exc_info.value.error.context.origin == "import_rows"

    def test_non_type_declaration_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Contract(count=int)
        assert exc_info.value.code is ErrorCode.E5104_INVALID_DECLARATION

    def test_typecheck_shortcut(self, t):
        report = typecheck({"x": 5}, x=t.integer(minimum=0, maximum=10))
        assert isinstance(report, ContractReport)
        assert report.ok


class TestEnforce:
    def test_passing_contract_returns_report(self, contract):
        assert contract.enforce({"count": 0, "name": "a", "unit": "s"}).ok

    def test_violation_raised_with_all_reasons(self, contract):
        with pytest.raises(ContractViolation) as exc_info:
            contract.enforce({"count": -1, "name": "two words", "unit": "s"})
        violation = exc_info.value
        assert violation.code is ErrorCode.E2005_CONSTRAINT_VIOLATION
        assert set(violation.error.metadata["violations"]) == {"count", "name"}
        assert "count: -1 is less than minimum 0" in str(violation)

    def test_violation_is_logged(self, contract):
        with capture_logs() as logs:
            with pytest.raises(ContractViolation):
                contract.enforce({"count": -1, "name": "a", "unit": "s"})
        assert logs[0]["event"] == "contract_violated"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["names"] == ["count"]


class TestChecked:
    def test_arguments_checked_before_call(self, t):
        calls = []

        @checked(x=t.numeric(), unit=t.one_of("m", "s"))
        def scale(x, unit="m"):
            calls.append((x, unit))
            return x * 2

        assert scale(2) == 4
        assert scale(1.5, unit="s") == 3.0
        with pytest.raises(ContractViolation):
            scale("2")
        with pytest.raises(ContractViolation):
            scale(1, "kg")
        assert calls == [(2, "m"), (1.5, "s")]

    def test_violation_origin_is_function(self, t):
        @checked(n=t.integer())
        def square(n):
            return n * n

        with pytest.raises(ContractViolation) as exc_info:
            square(n=1.5)
        assert exc_info.value.error.context.origin.endswith("square")

    def test_parameter_named_origin(self, t):
        @checked(origin=t.string())
        def locate(origin):
            return origin

        assert locate("depot") == "depot"
        with pytest.raises(ContractViolation) as exc_info:
            locate(7)
        assert exc_info.value.report.reasons == {"origin": ("expected str, got int",)}
        assert exc_info.value.error.context.origin.endswith("locate")

    def test_unknown_parameter_rejected_at_decoration(self, t):
        with pytest.raises(ConfigurationError):
            @checked(missing=t.any())
            def f(x):
                return x

    def test_contract_exposed_and_metadata_preserved(self, t):
        @checked(x=t.integer())
        def documented(x):
            """Doc."""
            return x

        assert documented.__doc__ == "Doc."
        assert list(documented.__contract__.declarations) == ["x"]
