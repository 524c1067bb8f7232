# api/models.py
from sqlalchemy import (
    BigInteger, Column, ForeignKey, Integer, String, Text, create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker

from .config import DATABASE_URL

Base = declarative_base()

class Influencer(Base):
    __tablename__ = "influencers"

    id              = Column(Integer,    primary_key=True, index=True)
    name            = Column(String,     nullable=False)
    category        = Column(String,     nullable=False)
    trust_score     = Column(Integer,    nullable=False, default=0)
    followers_count = Column(BigInteger, nullable=False, default=0)
    verified_claims = Column(Integer,    nullable=False, default=0)

    posts = relationship(
        "Post",
        back_populates="influencer",
        cascade="all, delete-orphan",
        order_by="Post.id",
    )

class Post(Base):
    __tablename__ = "posts"

    id            = Column(Integer, primary_key=True, index=True)
    content       = Column(Text,    nullable=False)
    status        = Column(String,  nullable=False)
    trust_score   = Column(Integer, nullable=False, default=0)
    influencer_id = Column(
        Integer, ForeignKey("influencers.id"), nullable=False, index=True
    )

    influencer = relationship("Influencer", back_populates="posts")

engine       = create_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)
