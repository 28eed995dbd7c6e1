"""Database driver adapters supplying quoting and column metadata."""

from .sqlalchemy_driver import SqlAlchemyMetadataProvider, SqlAlchemyQuoter, raw_type_name

__all__ = ["SqlAlchemyMetadataProvider", "SqlAlchemyQuoter", "raw_type_name"]
