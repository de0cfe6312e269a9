from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import declarative_base


Base = declarative_base()


class Recipe(Base):
    __tablename__ = "recipes"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=True)
    ingredients = Column(Text, nullable=True)
    method = Column(Text, nullable=True)
