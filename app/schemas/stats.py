from pydantic import BaseModel, ConfigDict


class Stats(BaseModel):
    """@brief Descriptive statistics of one upstream series.

    @var mean: Arithmetic mean, formatted with 3 decimals.
    @var median: Median value, formatted with 3 decimals.
    @var min: Smallest value, formatted with 3 decimals.
    @var max: Largest value, formatted with 3 decimals.
    """

    model_config = ConfigDict(frozen=True)

    mean: str
    median: str
    min: str
    max: str
