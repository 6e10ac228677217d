from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.write_pzfx_use_case import WritePzfxDependencies, WritePzfxUseCase
from ..config import ConfigLoader, WriterConfig
from .io.pzfx_file_writer import PzfxFileWriter
from .io.table_adapters import TableAdapter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from ..application.ports.services import (
        DocumentWriterPort,
        LoggerPort,
        TableAdapterPort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: WriterConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console(stderr=True)
        self.use_null_logger = use_null_logger
        self._config = config
        self._logger_instance: LoggerPort | None = None
        self._document_writer_instance: DocumentWriterPort | None = None
        self._table_adapter_instance: TableAdapterPort | None = None

    @property
    def config(self) -> WriterConfig:
        if self._config is None:
            self._config = ConfigLoader.load()
        return self._config

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_document_writer(self) -> DocumentWriterPort:
        if self._document_writer_instance is None:
            self._document_writer_instance = PzfxFileWriter()
        return self._document_writer_instance

    def create_table_adapter(self) -> TableAdapterPort:
        if self._table_adapter_instance is None:
            self._table_adapter_instance = TableAdapter()
        return self._table_adapter_instance

    def create_write_use_case(self) -> WritePzfxUseCase:
        return WritePzfxUseCase(
            WritePzfxDependencies(
                logger=self.create_logger(),
                table_adapter=self.create_table_adapter(),
                document_writer=self.create_document_writer(),
                config=self.config,
            )
        )

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_document_writer(self, writer: DocumentWriterPort) -> None:
        self._document_writer_instance = writer


def create_default_container(
    verbose: int = 0,
    console: Console | None = None,
    use_null_logger: bool = False,
    config: WriterConfig | None = None,
) -> DependencyContainer:
    return DependencyContainer(
        verbose=verbose,
        console=console,
        use_null_logger=use_null_logger,
        config=config,
    )
