"""Chart descriptor models embedded by the model at the end of an answer."""

from dataclasses import dataclass
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class ChartPoint(BaseModel):
    """One data point of a chart."""

    label: str
    value: float

    @field_validator("label", mode="before")
    @classmethod
    def stringify_label(cls, v: Any) -> str:
        """Accept numeric labels such as years.

        Args:
            v: The raw label value

        Returns:
            The label as a string
        """
        return str(v)


class ChartData(BaseModel):
    """Chart descriptor as emitted by the model."""

    type: str = Field("bar", description="Chart type (bar, line, pie, ...)")
    title: str = Field("", description="Chart title")
    data: List[ChartPoint] = Field(default_factory=list)


@dataclass
class ChartExtraction:
    """Answer text prepared for display plus the chart it carried, if any.

    Attributes:
        text: Text to display to the user
        chart: Parsed chart descriptor, None when the answer had none
    """

    text: str
    chart: Optional[ChartData] = None
