"""Functional entry points for writing Prism ``.pzfx`` files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TypeVar
import warnings

from .application.models import TableOptions, WritePzfxRequest
from .constants import Defaults
from .exceptions import PzfxWarning
from .infrastructure.container import create_default_container

if TYPE_CHECKING:
    from xml.etree import ElementTree as ET

    from .application.models import ColumnSelector, PerTable
    from .application.ports.services import LoggerPort
    from .application.write_pzfx_use_case import WritePzfxUseCase
    from .config import WriterConfig
    from .domain.services.document_builder import CreationInfo

TablesT = TypeVar("TablesT")


def _create_use_case(
    logger: LoggerPort | None, config: WriterConfig | None
) -> WritePzfxUseCase:
    container = create_default_container(use_null_logger=logger is None, config=config)
    if logger is not None:
        container.override_logger(logger)
    return container.create_write_use_case()


def build_pzfx_tree(
    x: object,
    notes: object = None,
    *,
    row_names: bool | PerTable[bool] = Defaults.ROW_NAMES,
    x_col: ColumnSelector | PerTable[ColumnSelector] = None,
    x_err: ColumnSelector | PerTable[ColumnSelector] = None,
    n_digits: float | None | PerTable[float | None] = None,
    subcolumns: int | str | PerTable[int | str] = Defaults.SUBCOLUMNS,
    subcolumn_suffix: str | PerTable[str] | None = None,
    created: CreationInfo | None = None,
    logger: LoggerPort | None = None,
    config: WriterConfig | None = None,
) -> ET.Element:
    """Build the ``GraphPadPrismFile`` element without writing it.

    Takes the same arguments as :func:`write_pzfx` apart from the path.
    """
    options = TableOptions(
        row_names=row_names,
        x_col=x_col,
        x_err=x_err,
        n_digits=n_digits,
        subcolumns=subcolumns,
        subcolumn_suffix=subcolumn_suffix,
    )
    request = WritePzfxRequest(
        tables=x, notes=notes, options=options, created=created
    )
    built = _create_use_case(logger, config).build(request)
    for message in built.warnings:
        warnings.warn(message, PzfxWarning, stacklevel=2)
    return built.root


def write_pzfx(
    x: TablesT,
    path: str | Path,
    *,
    row_names: bool | PerTable[bool] = Defaults.ROW_NAMES,
    x_col: ColumnSelector | PerTable[ColumnSelector] = None,
    x_err: ColumnSelector | PerTable[ColumnSelector] = None,
    n_digits: float | None | PerTable[float | None] = None,
    notes: object = None,
    subcolumns: int | str | PerTable[int | str] = Defaults.SUBCOLUMNS,
    subcolumn_suffix: str | PerTable[str] | None = None,
    created: CreationInfo | None = None,
    logger: LoggerPort | None = None,
    config: WriterConfig | None = None,
) -> TablesT:
    """Write one or several tables to a GraphPad Prism ``.pzfx`` file.

    Args:
        x: A table (DataFrame, 2-D array or DataTable), or a list or dict of
            tables; dict keys become the table titles
        path: Output file
        row_names: Write the row labels as row titles
        x_col: 1-based position or name of the X column; None for no X column
        x_err: Position or name of the X error column; needs ``x_col``
        n_digits: Decimals Prism displays; ignored for integer columns
        notes: A key/value table, or a list or dict of them, written as Info
            tables. Rows keyed ``Notes`` form the free-text notes. Without
            notes a blank project info table is written
        subcolumns: Subcolumns per Y column, or ``"SDN"`` for mean/SD/N
        subcolumn_suffix: Regular expression stripped from column names to
            group replicate columns; empty makes each column its own group
        created: Creation metadata for the header; defaults to now
        logger: Receives progress and warnings; warnings are also issued
            as :class:`PzfxWarning`
        config: Writer configuration; loaded from the environment by default

    All per-table arguments take one value for every table, or a list, numpy
    array or Series with one value per table.

    Returns:
        ``x``, unchanged

    Raises:
        TableShapeError: Inputs or options do not fit the tables
        SubcolumnGroupingError: A replicate group has too many columns
        PzfxWriteError: The file could not be written
    """
    options = TableOptions(
        row_names=row_names,
        x_col=x_col,
        x_err=x_err,
        n_digits=n_digits,
        subcolumns=subcolumns,
        subcolumn_suffix=subcolumn_suffix,
    )
    request = WritePzfxRequest(
        tables=x, output_path=Path(path), notes=notes, options=options, created=created
    )
    response = _create_use_case(logger, config).execute(request)
    for message in response.warnings:
        warnings.warn(message, PzfxWarning, stacklevel=2)
    return x
