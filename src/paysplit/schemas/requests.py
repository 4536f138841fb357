from pydantic import BaseModel, Field

from paysplit.schemas.records import OrderRecord, PaymentMethodRecord


class AllocateRequest(BaseModel):
    orders: list[OrderRecord]
    payment_methods: list[PaymentMethodRecord] = Field(default_factory=list)
    prioritize: bool = False
