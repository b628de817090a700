from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from taskapi.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String, unique=True, nullable=False)
    # bcrypt hash, never the plaintext
    password = Column(String, nullable=False)

    tasks = relationship("Task", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
