from sqlalchemy import Column, Date, Integer, String

from app.database import Base


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(String, primary_key=True)
    # copied from the user at creation time, not a foreign key
    username = Column(String, nullable=False, index=True)
    description = Column(String, nullable=False)
    duration = Column(Integer, nullable=False)
    date = Column(Date, nullable=False, index=True)
