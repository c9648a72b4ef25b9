'''
JWT payload model
'''
from pydantic import BaseModel
from datetime import datetime

class TokenPayload(BaseModel):
    sub: str # 'sub' is standard JWT claim for subject (the user's id)
    exp: datetime
