"""Tests for gmldocs.ingestion.parameters."""

from typing import List, Optional, Tuple

from gmldocs.ingestion.parameters import (
    ParameterScan,
    apply_parameter_scan,
    is_variadic_label,
    parse_parameter_tables,
)
from gmldocs.models.docs import UNBOUNDED_PARAMETERS, DocParam
from gmldocs.models.draft import FunctionDraft
from gmldocs.models.report import FailureReport
from gmldocs.utils.markup import load_page

from conftest import argument_table

DECOY_TABLE = (
    "<table>\n<tbody>\n<tr>\n<td>Constant</td>\n<td>Value</td>\n</tr>\n"
    "<tr>\n<td>c_red</td>\n<td>255</td>\n</tr>\n</tbody>\n</table>\n"
)


def scan_of(html: str, report: Optional[FailureReport] = None) -> ParameterScan:
    soup = load_page(html)
    return parse_parameter_tables(soup.find_all("table"), "f", report or FailureReport())


def labels(scan: ParameterScan) -> List[str]:
    return [param.label for param in scan.parameters]


class TestParseParameterTables:
    def test_rows_after_headers(self) -> None:
        rows: List[Tuple[str, str]] = [("x", "The x position"), ("y", "The <b>y</b> position")]
        scan = scan_of(argument_table(rows))
        assert scan.parameters == [
            DocParam(label="x", documentation="The x position"),
            DocParam(label="y", documentation="The y position"),
        ]
        assert scan.variadic_index is None

    def test_decoy_table_ignored(self) -> None:
        scan = scan_of(DECOY_TABLE + argument_table([("id", "The list")]))
        assert labels(scan) == ["id"]

    def test_table_without_tbody_ignored(self) -> None:
        scan = scan_of("<table>\n<tr>\n<th>Argument</th>\n<th>Description</th>\n</tr>\n</table>")
        assert scan.parameters == []

    def test_ellipsis_marks_variadic_row(self) -> None:
        scan = scan_of(argument_table([("id", "The list"), ("val", "Value"), ("[val...]", "More")]))
        assert scan.variadic_index == 2

    def test_last_table_with_ellipsis_wins(self) -> None:
        html = argument_table([("a", ""), ("b...", "")]) + argument_table([("c...", "")])
        scan = scan_of(html)
        assert labels(scan) == ["a", "b...", "c..."]
        assert scan.variadic_index == 2

    def test_empty_first_cell_shifts_label(self) -> None:
        scan = scan_of(argument_table([("", "only documentation")]))
        assert scan.parameters == [DocParam(label="only documentation", documentation="")]


def test_is_variadic_label() -> None:
    assert is_variadic_label("val...")
    assert is_variadic_label("args…")
    assert not is_variadic_label("val")


class TestApplyParameterScan:
    def _draft(self) -> FunctionDraft:
        return FunctionDraft(
            name="ds_list_add",
            signature="ds_list_add(id, val [, val2, ... max_val]);",
            min_parameters=2,
            max_parameters=4,
            link="https://docs2.yoyogames.com/ds_list_add.html",
        )

    def test_variadic_sets_unbounded_maximum(self) -> None:
        scan = ParameterScan(
            parameters=[DocParam(label="id", documentation=""), DocParam(label="val...", documentation="")],
            variadic_index=1,
        )
        draft = apply_parameter_scan(self._draft(), scan)
        assert draft.max_parameters == UNBOUNDED_PARAMETERS
        assert draft.min_parameters == 1
        assert len(draft.parameters) == 2

    def test_plain_scan_keeps_signature_arity(self) -> None:
        draft = apply_parameter_scan(self._draft(), ParameterScan())
        assert (draft.min_parameters, draft.max_parameters) == (2, 4)
