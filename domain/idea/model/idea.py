from typing import Optional

from sqlalchemy import BigInteger, Integer
from sqlmodel import SQLModel, Field, Column


class Idea(SQLModel, table=True):
    """Idea 테이블 모델 - Spring Entity를 SQLModel로 변환"""
    __tablename__ = "idea"

    # Primary Key (BIGINT, SQLite에서는 rowid 자동 증가를 위해 INTEGER)
    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True),
    )

    title: str = Field(default="", description="아이디어 제목")
    description: str = Field(default="", description="아이디어 설명")
