from pydantic import BaseModel

class TaskIn(BaseModel):
    title: str
    description: str

class TaskOut(TaskIn):
    id: int

    class Config:
        from_attributes = True
        frozen = True
