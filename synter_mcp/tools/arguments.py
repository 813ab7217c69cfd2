"""
Per-tool argument models.

One frozen pydantic model per tool name. Validation is a presence/type gate
only: required scalars must be present and non-null, numbers must be numbers.
Length limits, ranges and enum membership stay advisory text in the catalog
and are left to the remote API.

Arrays always default to empty: an omitted list maps to zero flags.
"""

from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator


def stringify(value: Any) -> str:
    """Render a scalar the way the remote CLI expects (50.0 -> '50')."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _number_as_text(value: Any) -> Any:
    # ids and free-text args may arrive as JSON numbers
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return stringify(value)
    return value


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    return value


Text = Annotated[str, BeforeValidator(_number_as_text)]
Number = Annotated[Union[int, float], BeforeValidator(_reject_bool)]


class ToolArguments(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_list_is_empty(cls, value, info):
        field = cls.model_fields.get(info.field_name)
        if value is None and field is not None and field.default_factory is list:
            return []
        return value


def _strings():
    return Field(default_factory=list)


# ── Campaign management ──────────────────────────────────────────────────


class ListCampaignsArgs(ToolArguments):
    platform: Optional[Text] = None
    status: Optional[Text] = None
    limit: Optional[Number] = None


class CreateSearchCampaignArgs(ToolArguments):
    campaign_name: Text
    daily_budget: Number
    final_url: Text
    keywords: list[Text] = _strings()
    headlines: list[Text] = _strings()
    descriptions: list[Text] = _strings()
    geo_targets: list[Text] = _strings()


class CreateDisplayCampaignArgs(ToolArguments):
    campaign_name: Text
    daily_budget: Number
    business_name: Text
    final_url: Text
    landscape_image_url: Optional[Text] = None
    square_image_url: Optional[Text] = None
    headlines: list[Text] = _strings()
    descriptions: list[Text] = _strings()
    geo_targets: list[Text] = _strings()


class CreatePmaxCampaignArgs(ToolArguments):
    campaign_name: Text
    daily_budget: Number
    business_name: Text
    final_url: Text
    long_headline: Text
    landscape_image_url: Optional[Text] = None
    square_image_url: Optional[Text] = None
    logo_url: Optional[Text] = None
    target_cpa: Optional[Number] = None
    headlines: list[Text] = _strings()
    descriptions: list[Text] = _strings()
    geo_targets: list[Text] = _strings()


class PauseCampaignArgs(ToolArguments):
    campaign_id: Text
    platform: Optional[Text] = None


class UpdateCampaignBudgetArgs(ToolArguments):
    campaign_id: Text
    daily_budget: Number
    platform: Optional[Text] = None


# ── Performance & analytics ──────────────────────────────────────────────


class GetPerformanceArgs(ToolArguments):
    platform: Optional[Text] = None
    campaign_id: Optional[Text] = None
    date_range: Optional[Text] = None


class GetDailySpendArgs(ToolArguments):
    days: Optional[Number] = None
    platform: Optional[Text] = None


# ── Keywords ─────────────────────────────────────────────────────────────


class AddKeywordsArgs(ToolArguments):
    ad_group_id: Text
    keywords: list[Text] = _strings()
    match_type: Optional[Text] = None


class AddNegativeKeywordsArgs(ToolArguments):
    campaign_id: Text
    keywords: list[Text] = _strings()
    level: Optional[Text] = None


# ── Conversion tracking ──────────────────────────────────────────────────


class CreateConversionArgs(ToolArguments):
    name: Text
    value: Optional[Number] = None
    category: Optional[Text] = None


class NoArgs(ToolArguments):
    pass


class DiagnoseTrackingArgs(ToolArguments):
    url: Text


# ── Creative generation ──────────────────────────────────────────────────


class GenerateImageArgs(ToolArguments):
    prompt: Text
    size: Optional[Text] = None
    provider: Optional[Text] = None
    name: Optional[Text] = None


class GenerateVideoArgs(ToolArguments):
    product_name: Text
    key_benefit: Text
    concept: Optional[Text] = None
    target_audience: Optional[Text] = None
    duration: Optional[Number] = None
    provider: Optional[Text] = None


# ── Platform campaigns ───────────────────────────────────────────────────


class PlatformCampaignArgs(ToolArguments):
    name: Text
    objective: Text
    daily_budget: Number


class CreateLinkedInCampaignArgs(PlatformCampaignArgs):
    target_company_sizes: list[Text] = _strings()
    target_industries: list[Text] = _strings()
    target_job_functions: list[Text] = _strings()


class CreateRedditCampaignArgs(PlatformCampaignArgs):
    subreddits: list[Text] = _strings()
    interests: list[Text] = _strings()


# ── Utility ──────────────────────────────────────────────────────────────


class UploadImageArgs(ToolArguments):
    image_url: Text
    asset_name: Text
    platform: Optional[Text] = None


class RunToolArgs(ToolArguments):
    script_name: Text
    args: list[Text] = _strings()
    platform: Optional[Text] = None
