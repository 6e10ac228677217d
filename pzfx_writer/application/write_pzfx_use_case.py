"""Use case turning caller tables and notes into a written ``.pzfx`` file.

All tables and notes are adapted, checked and assembled before anything is
handed to the document writer, so a failing table never leaves a partial
file behind.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, TypeVar, cast

from ..config import WriterConfig
from ..domain.entities.annotation import default_annotation_table
from ..domain.services.document_builder import CreationInfo, build_document
from ..domain.services.info_assembler import build_info_table
from ..domain.services.table_assembler import build_data_table
from ..exceptions import PzfxWriterError, TableShapeError
from .models import BuiltDocument, WritePzfxResponse
from .option_resolver import resolve_layouts

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from xml.etree import ElementTree as ET

    from ..domain.entities.annotation import AnnotationTable
    from ..domain.entities.table import DataTable
    from .models import TableOptions, WritePzfxRequest
    from .ports.services import DocumentWriterPort, LoggerPort, TableAdapterPort

T = TypeVar("T")


@dataclass(slots=True)
class WritePzfxDependencies:
    logger: LoggerPort
    table_adapter: TableAdapterPort
    document_writer: DocumentWriterPort | None = None
    config: WriterConfig | None = None


def _named_items(collection: object, prefix: str) -> list[tuple[str, object]]:
    if isinstance(collection, Mapping):
        mapping = cast("Mapping[object, object]", collection)
        return [(str(name), value) for name, value in mapping.items()]
    items = cast("Sequence[object]", collection)
    return [(f"{prefix} {i}", value) for i, value in enumerate(items, start=1)]


class WritePzfxUseCase:
    pass

    def __init__(self, dependencies: WritePzfxDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._table_adapter = dependencies.table_adapter
        self._document_writer = dependencies.document_writer
        self._config = dependencies.config or WriterConfig()

    def execute(self, request: WritePzfxRequest) -> WritePzfxResponse:
        """Build the document and write it to ``request.output_path``.

        Raises:
            PzfxWriterError: Shape or grouping errors, or the write failed
        """
        if request.output_path is None:
            raise PzfxWriterError("No output path given")
        if self._document_writer is None:
            raise PzfxWriterError("No document writer configured")
        built = self.build(request)
        path = self._document_writer.write(built.root, request.output_path)
        self.logger.log_document_written(
            path, len(built.table_names), len(built.info_names)
        )
        return WritePzfxResponse(
            output_path=path,
            table_names=built.table_names,
            info_names=built.info_names,
            warnings=built.warnings,
        )

    def build(self, request: WritePzfxRequest) -> BuiltDocument:
        """Build the complete document tree without writing it."""
        tables = self._normalize_tables(request.tables)
        notes = self._normalize_notes(request.notes)
        warnings: list[str] = []

        mixed = [name for name, table in tables.items() if not table.is_numeric()]
        if mixed:
            self._warn(
                warnings,
                f"These tables are not all numeric: {', '.join(mixed)}. "
                "Non-numeric values will be ignored by GraphPad Prism. "
                "Trailing asterisks mark values as excluded.",
            )

        layouts, option_warnings = resolve_layouts(
            tables,
            self._normalize_options(request.options),
            default_suffix=self._config.subcolumn_suffix,
        )
        for message in option_warnings:
            self._warn(warnings, message)

        info_elements = [
            build_info_table(table, name, i) for i, (name, table) in enumerate(notes.items())
        ]
        table_elements: list[ET.Element] = []
        for i, ((name, table), layout) in enumerate(
            zip(tables.items(), layouts, strict=True)
        ):
            element = build_data_table(table, name, i, layout)
            table_elements.append(element)
            self.logger.log_table_built(
                name, table.row_count, len(element.findall("YColumn"))
            )

        created = request.created or CreationInfo(
            program=self._config.created_by_program,
            version=self._config.created_by_version,
            login=self._config.login,
        )
        root = build_document(table_elements, info_elements, created)
        return BuiltDocument(
            root=root,
            table_names=list(tables),
            info_names=list(notes),
            warnings=warnings,
        )

    def _warn(self, warnings: list[str], message: str) -> None:
        warnings.append(message)
        self.logger.warning(message)

    def _normalize_tables(self, tables: object) -> dict[str, DataTable]:
        prefix = self._config.table_name_prefix
        single = self._table_adapter.as_data_table(tables)
        if single is not None:
            return {f"{prefix} 1": single}
        if not self._table_adapter.is_table_collection(tables):
            raise TableShapeError(
                f"Cannot process tables of type {type(tables).__name__}"
            )
        adapted = self._adapt_all(
            _named_items(tables, prefix), self._table_adapter.as_data_table
        )
        if not adapted:
            raise TableShapeError("No tables to write")
        return adapted

    def _normalize_options(self, options: TableOptions) -> TableOptions:
        """Convert option values to plain Python, arrays to per-table lists."""
        return replace(
            options,
            **{
                option.name: self._table_adapter.as_option_value(
                    getattr(options, option.name)
                )
                for option in fields(options)
            },
        )

    def _normalize_notes(self, notes: object) -> dict[str, AnnotationTable]:
        prefix = self._config.info_name_prefix
        if notes is None:
            return {f"{prefix} 1": default_annotation_table()}
        if not self._table_adapter.is_annotation_collection(notes):
            single = self._table_adapter.as_annotation_table(notes)
            if single is None:
                raise TableShapeError(
                    f"Cannot process notes of type {type(notes).__name__}"
                )
            return {f"{prefix} 1": single}
        return self._adapt_all(
            _named_items(notes, prefix), self._table_adapter.as_annotation_table
        )

    @staticmethod
    def _adapt_all(
        items: list[tuple[str, object]], adapt: Callable[[object], T | None]
    ) -> dict[str, T]:
        adapted: dict[str, T] = {}
        rejected: list[str] = []
        duplicated: list[str] = []
        for name, value in items:
            table = adapt(value)
            if table is None:
                rejected.append(name)
            elif name in adapted:
                duplicated.append(name)
            else:
                adapted[name] = table
        if rejected:
            raise TableShapeError(
                f"These elements are not tables: {', '.join(rejected)}"
            )
        if duplicated:
            raise TableShapeError(
                f"Table names must be unique, repeated: {', '.join(duplicated)}"
            )
        return adapted
