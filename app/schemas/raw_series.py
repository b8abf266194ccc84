from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class RawSeries(BaseModel):
    """@brief Parallel timestamp/value arrays exactly as returned by upstream.

    @details Produced by `UpstreamClient.decode` (`app/repositories/upstream.py`)
    and consumed by `compute_stats` (`app/core/stats.py`).

    @note Values are kept as raw strings; numeric validation happens when
    statistics are computed. Keys are matched case-insensitively (`Values`,
    `values`, `VALUES`) and the last matching key wins. Missing or `null`
    arrays decode to empty tuples.
    """

    model_config = ConfigDict(frozen=True)

    timestamps: tuple[str, ...] = Field(
        default=(),
        description="Unix timestamps of each sample, as strings",
    )
    values: tuple[str, ...] = Field(
        default=(),
        description="Measured values of each sample, as strings",
    )

    @model_validator(mode="before")
    @classmethod
    def fold_key_case(cls, data: object) -> object:
        """@brief Map payload keys onto field names ignoring ASCII case."""
        if not isinstance(data, dict):
            return data

        folded: dict[object, object] = {}
        for key, item in data.items():
            name = key.lower() if isinstance(key, str) else key
            if name in cls.model_fields:
                folded[name] = item
            else:
                folded[key] = item
        return folded

    @field_validator("timestamps", "values", mode="before")
    @classmethod
    def null_as_empty(cls, items: object) -> object:
        """@brief Treat a JSON `null` array as an empty one."""
        if items is None:
            return ()
        return items
