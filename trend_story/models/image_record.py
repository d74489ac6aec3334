from sqlalchemy import Column, Integer, Text

from ..core.database import Base


class ImageRecord(Base):
    __tablename__ = "image_data"

    id = Column(Integer, primary_key=True, autoincrement=True)
    file_name = Column(Text)
