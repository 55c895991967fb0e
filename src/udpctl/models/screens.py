"""Screens exchanged with the interactive configuration channel."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

TERMINATE = "Terminate"


class InstructionScreen(BaseModel):
    interface: Literal["instruction"] = "instruction"
    title: str
    detail: str
    show_next_button: bool = True


class ListScreen(BaseModel):
    interface: Literal["list"] = "list"
    title: str
    items: list[str]


class InputItem(BaseModel):
    id: str
    title: str
    placeholder: str = ""


class InputScreen(BaseModel):
    interface: Literal["input"] = "input"
    title: str
    items: list[InputItem]


Screen = Annotated[
    InstructionScreen | ListScreen | InputScreen, Field(discriminator="interface")
]


class WizardResponse(BaseModel):
    selections: list[int] = Field(default_factory=list)
    inputs: dict[str, str] = Field(default_factory=dict)


class WizardRequest(BaseModel):
    """One operator turn: the answer to the previously delivered screen."""

    type: str = "Interface"
    response: WizardResponse | None = None

    @property
    def is_terminate(self) -> bool:
        return self.type == TERMINATE

    @classmethod
    def terminate(cls) -> WizardRequest:
        return cls(type=TERMINATE)

    @classmethod
    def select(cls, index: int) -> WizardRequest:
        return cls(response=WizardResponse(selections=[index]))

    @classmethod
    def submit(cls, **inputs: str) -> WizardRequest:
        return cls(response=WizardResponse(inputs=inputs))
