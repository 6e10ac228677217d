from .services import DocumentWriterPort, LoggerPort, TableAdapterPort

__all__ = ["DocumentWriterPort", "LoggerPort", "TableAdapterPort"]
