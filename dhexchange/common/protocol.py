"""Pydantic models: DhParams (agreed g, p) and PublicPair (r1, r2)."""

from pydantic import BaseModel, Field, model_validator


# -------------------- GROUP PARAMETERS -------------------- #

class DhParams(BaseModel):
    g: int    # generator
    p: int    # modulus, meant to be prime (never checked)

    @model_validator(mode="after")
    def check_range(self):
        if not 1 < self.g < self.p:
            raise ValueError("expected 1 < g < p")
        return self


# -------------------- PUBLIC VALUES -------------------- #

class PublicPair(BaseModel):
    r1: int = Field(ge=0)    # g^a mod p
    r2: int = Field(ge=0)    # g^b mod p
