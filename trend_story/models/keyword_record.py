from sqlalchemy import Column, Integer, Text

from ..core.database import Base


class KeywordRecord(Base):
    """Search keyword row; categories holds `kind-value` tokens joined by `|`."""
    __tablename__ = "serpapi_data"

    id = Column(Integer, primary_key=True, autoincrement=True)
    query = Column(Text)
    categories = Column(Text)
