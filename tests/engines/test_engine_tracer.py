"""
Tests for the engine tracer (``expense_engines.tracer``).

Covers:
- Deterministic input fingerprints for filters and domain values
- EXPENSE_ENGINE_TRACE emission around ExpenseReport.get_report
"""

from decimal import Decimal

from expense_engines.report import ReportFilter
from expense_engines.tracer import (
    TRACE_TYPE,
    _canonicalize,
    compute_input_fingerprint,
    traced_engine,
)
from expense_kernel.domain.catalog import ExpenseSubType, ExpenseType


class TestCanonicalize:

    def test_scalars(self):
        assert _canonicalize(None) == "null"
        assert _canonicalize(True) == "True"
        assert _canonicalize(Decimal("1.50")) == "1.50"
        assert _canonicalize("2023-04-15") == "2023-04-15"

    def test_enum_uses_value(self):
        assert _canonicalize(ExpenseType.MEAL) == "meal"

    def test_dataclass_fields_sorted(self):
        text = _canonicalize(ReportFilter(expense_type=ExpenseType.TRAVEL))
        assert text.startswith("{end_date:null,expense_sub_type:null,expense_type:travel")


class TestFingerprint:

    def test_deterministic(self):
        kwargs = {"report_filter": ReportFilter(expense_sub_type=ExpenseSubType.BUS)}
        first = compute_input_fingerprint(("report_filter",), kwargs)
        second = compute_input_fingerprint(("report_filter",), dict(kwargs))
        assert first == second
        assert len(first) == 16

    def test_differs_by_filter(self):
        a = compute_input_fingerprint(("f",), {"f": ReportFilter(start_date="2023-04-15")})
        b = compute_input_fingerprint(("f",), {"f": ReportFilter(start_date="2023-04-17")})
        assert a != b

    def test_missing_field_is_null(self):
        assert compute_input_fingerprint(("f",), {}) == compute_input_fingerprint(
            ("f",), {"f": None}
        )


class TestTracedEngine:

    def test_wrapped_result_unchanged(self, captured_logs):
        @traced_engine("adder", "2.0", fingerprint_fields=("a", "b"))
        def add(a, b=Decimal("1")):
            return a + b

        assert add(Decimal("2")) == Decimal("3")
        traces = [r for r in captured_logs() if r["message"] == TRACE_TYPE]
        assert len(traces) == 1
        assert traces[0]["engine_name"] == "adder"
        assert traces[0]["engine_version"] == "2.0"
        assert traces[0]["input_fingerprint"] == compute_input_fingerprint(
            ("a", "b"), {"a": Decimal("2"), "b": Decimal("1")}
        )

    def test_get_report_traced(self, expense_report, captured_logs):
        report_filter = ReportFilter(expense_type=ExpenseType.MEAL)
        expense_report.get_report(report_filter)
        expense_report.get_report(report_filter=report_filter)

        traces = [r for r in captured_logs() if r["message"] == TRACE_TYPE]
        assert len(traces) == 2
        assert {t["engine_name"] for t in traces} == {"expense_report"}
        assert traces[0]["input_fingerprint"] == traces[1]["input_fingerprint"]
        assert traces[0]["function"] == "ExpenseReport.get_report"
        assert traces[0]["duration_ms"] >= 0
