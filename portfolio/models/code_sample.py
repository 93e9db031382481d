"""Code sample model."""
from sqlalchemy import Column, Integer, String, Text

from portfolio.db.session import Base


class CodeSample(Base):
    __tablename__ = "code_samples"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    language = Column(String(50), nullable=False)
    code = Column(Text, nullable=False)
