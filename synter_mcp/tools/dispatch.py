"""
Dispatch Table — tool name -> (remote script, platform rule, argument mapper)

Every tool call is flattened into a command-line style token list and sent
to the single ``tools/run`` endpoint:

    pause_campaign {"campaign_id": "123", "platform": "meta"}
      -> RemoteRequest("pause_campaign", ("--campaign-id", "123"), "meta")

Mappers emit flags in their own declaration order, never in input key
order. That order is part of the wire contract.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Optional

from pydantic import ValidationError

from ..api.client import RemoteRequest
from ..errors import InvalidArgumentsError, UnknownToolError
from . import arguments as a
from .arguments import stringify

DEFAULT_PLATFORM = "google"

Mapper = Callable[[Any], list[str]]
PlatformRule = Callable[[Any], Optional[str]]


# ── token building ───────────────────────────────────────────────────────


class CliArgs:
    """Ordered ``--flag value`` accumulator."""

    def __init__(self):
        self._tokens: list[str] = []

    def flag(self, name: str, value: Any) -> "CliArgs":
        self._tokens.extend((name, stringify(value)))
        return self

    def optional(self, name: str, value: Any) -> "CliArgs":
        if value is not None:
            self.flag(name, value)
        return self

    def repeated(self, name: str, values: Optional[Iterable[Any]]) -> "CliArgs":
        for value in values or ():
            self.flag(name, value)
        return self

    def tokens(self) -> list[str]:
        return list(self._tokens)


# ── platform rules ───────────────────────────────────────────────────────


def fixed(platform: str) -> PlatformRule:
    return lambda _args: platform


def from_args(default: Optional[str] = DEFAULT_PLATFORM) -> PlatformRule:
    return lambda args: getattr(args, "platform", None) or default


def no_platform(_args: Any) -> None:
    return None


# ── mappers ──────────────────────────────────────────────────────────────


def _no_flags(_args: Any) -> list[str]:
    return []


def _list_campaigns(x: a.ListCampaignsArgs) -> list[str]:
    return CliArgs().optional("--status", x.status).optional("--limit", x.limit).tokens()


def _create_search_campaign(x: a.CreateSearchCampaignArgs) -> list[str]:
    return (
        CliArgs()
        .flag("--campaign-name", x.campaign_name)
        .flag("--daily-budget", x.daily_budget)
        .flag("--final-url", x.final_url)
        .repeated("--keyword", x.keywords)
        .repeated("--headline", x.headlines)
        .repeated("--description", x.descriptions)
        .repeated("--geo-targets", x.geo_targets)
        .tokens()
    )


def _create_display_campaign(x: a.CreateDisplayCampaignArgs) -> list[str]:
    return (
        CliArgs()
        .flag("--campaign-name", x.campaign_name)
        .flag("--daily-budget", x.daily_budget)
        .flag("--business-name", x.business_name)
        .flag("--final-url", x.final_url)
        .optional("--landscape-image", x.landscape_image_url)
        .optional("--square-image", x.square_image_url)
        .repeated("--headline", x.headlines)
        .repeated("--description", x.descriptions)
        .repeated("--geo-targets", x.geo_targets)
        .tokens()
    )


def _create_pmax_campaign(x: a.CreatePmaxCampaignArgs) -> list[str]:
    # image flags carry a -url suffix here, unlike the display script
    return (
        CliArgs()
        .flag("--campaign-name", x.campaign_name)
        .flag("--daily-budget", x.daily_budget)
        .flag("--business-name", x.business_name)
        .flag("--final-url", x.final_url)
        .flag("--long-headline", x.long_headline)
        .optional("--landscape-image-url", x.landscape_image_url)
        .optional("--square-image-url", x.square_image_url)
        .optional("--logo-url", x.logo_url)
        .optional("--target-cpa", x.target_cpa)
        .repeated("--headline", x.headlines)
        .repeated("--description", x.descriptions)
        .repeated("--geo-targets", x.geo_targets)
        .tokens()
    )


def _pause_campaign(x: a.PauseCampaignArgs) -> list[str]:
    return CliArgs().flag("--campaign-id", x.campaign_id).tokens()


def _update_campaign_budget(x: a.UpdateCampaignBudgetArgs) -> list[str]:
    return CliArgs().flag("--campaign-id", x.campaign_id).flag("--budget", x.daily_budget).tokens()


def _get_performance(x: a.GetPerformanceArgs) -> list[str]:
    return (
        CliArgs()
        .optional("--campaign-id", x.campaign_id)
        .optional("--date-range", x.date_range)
        .tokens()
    )


def _get_daily_spend(x: a.GetDailySpendArgs) -> list[str]:
    return CliArgs().optional("--days", x.days).tokens()


def _add_keywords(x: a.AddKeywordsArgs) -> list[str]:
    return (
        CliArgs()
        .flag("--ad-group-id", x.ad_group_id)
        .repeated("--keyword", x.keywords)
        .optional("--match-type", x.match_type)
        .tokens()
    )


def _add_negative_keywords(x: a.AddNegativeKeywordsArgs) -> list[str]:
    return (
        CliArgs()
        .flag("--campaign-id", x.campaign_id)
        .repeated("--keyword", x.keywords)
        .optional("--level", x.level)
        .tokens()
    )


def _create_conversion(x: a.CreateConversionArgs) -> list[str]:
    return (
        CliArgs()
        .flag("--name", x.name)
        .optional("--value", x.value)
        .optional("--category", x.category)
        .tokens()
    )


def _diagnose_tracking(x: a.DiagnoseTrackingArgs) -> list[str]:
    return CliArgs().flag("--url", x.url).tokens()


def _generate_image(x: a.GenerateImageArgs) -> list[str]:
    return (
        CliArgs()
        .flag("--prompt", x.prompt)
        .optional("--size", x.size)
        .optional("--provider", x.provider)
        .optional("--name", x.name)
        .tokens()
    )


def _generate_video(x: a.GenerateVideoArgs) -> list[str]:
    return (
        CliArgs()
        .flag("--product", x.product_name)
        .flag("--benefit", x.key_benefit)
        .optional("--concept", x.concept)
        .optional("--audience", x.target_audience)
        .optional("--duration", x.duration)
        .optional("--provider", x.provider)
        .tokens()
    )


def _platform_campaign(x: a.PlatformCampaignArgs) -> CliArgs:
    return (
        CliArgs()
        .flag("--name", x.name)
        .flag("--objective", x.objective)
        .flag("--daily-budget", x.daily_budget)
    )


def _create_meta_campaign(x: a.PlatformCampaignArgs) -> list[str]:
    return _platform_campaign(x).tokens()


def _create_linkedin_campaign(x: a.CreateLinkedInCampaignArgs) -> list[str]:
    return (
        _platform_campaign(x)
        .repeated("--company-size", x.target_company_sizes)
        .repeated("--industry", x.target_industries)
        .repeated("--job-function", x.target_job_functions)
        .tokens()
    )


def _create_reddit_campaign(x: a.CreateRedditCampaignArgs) -> list[str]:
    return (
        _platform_campaign(x)
        .repeated("--subreddit", x.subreddits)
        .repeated("--interest", x.interests)
        .tokens()
    )


def _upload_image(x: a.UploadImageArgs) -> list[str]:
    return CliArgs().flag("--image-url", x.image_url).flag("--asset-name", x.asset_name).tokens()


def _run_tool(x: a.RunToolArgs) -> list[str]:
    return list(x.args)


# ── table ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class DispatchEntry:
    """
    How one tool reaches the remote API.

    ``script`` is None only for the escape hatch, whose script name comes
    from the invocation itself.
    """

    script: Optional[str]
    arguments: type
    mapper: Mapper
    platform: PlatformRule

    def resolve_script(self, args: Any) -> str:
        if self.script is not None:
            return self.script
        return args.script_name


DISPATCH: Mapping[str, DispatchEntry] = MappingProxyType({
    # Campaign management
    "list_campaigns": DispatchEntry(
        "google_ads_list_campaigns", a.ListCampaignsArgs, _list_campaigns, from_args()),
    "create_search_campaign": DispatchEntry(
        "google_ads_create_search_campaign", a.CreateSearchCampaignArgs,
        _create_search_campaign, fixed("google")),
    "create_display_campaign": DispatchEntry(
        "google_ads_create_display_campaign", a.CreateDisplayCampaignArgs,
        _create_display_campaign, fixed("google")),
    "create_pmax_campaign": DispatchEntry(
        "google_ads_create_pmax_campaign", a.CreatePmaxCampaignArgs,
        _create_pmax_campaign, fixed("google")),
    "pause_campaign": DispatchEntry(
        "pause_campaign", a.PauseCampaignArgs, _pause_campaign, from_args()),
    "update_campaign_budget": DispatchEntry(
        "update_campaign_budget", a.UpdateCampaignBudgetArgs, _update_campaign_budget, from_args()),

    # Performance
    "get_performance": DispatchEntry(
        "pull_google_ads_data", a.GetPerformanceArgs, _get_performance, from_args()),
    "get_daily_spend": DispatchEntry(
        "get_account_daily_spend", a.GetDailySpendArgs, _get_daily_spend, from_args()),

    # Keywords
    "add_keywords": DispatchEntry(
        "google_ads_add_keywords", a.AddKeywordsArgs, _add_keywords, fixed("google")),
    "add_negative_keywords": DispatchEntry(
        "google_ads_add_negative_keywords", a.AddNegativeKeywordsArgs,
        _add_negative_keywords, fixed("google")),

    # Conversions
    "create_conversion": DispatchEntry(
        "google_ads_create_conversion", a.CreateConversionArgs, _create_conversion, fixed("google")),
    "list_conversions": DispatchEntry(
        "google_ads_list_conversions", a.NoArgs, _no_flags, fixed("google")),
    "diagnose_tracking": DispatchEntry(
        "diagnose_conversion_tracking", a.DiagnoseTrackingArgs, _diagnose_tracking, no_platform),

    # Creative generation
    "generate_image": DispatchEntry(
        "generate_image", a.GenerateImageArgs, _generate_image, no_platform),
    "generate_video": DispatchEntry(
        "generate_video_ad", a.GenerateVideoArgs, _generate_video, no_platform),

    # Platform campaigns
    "create_meta_campaign": DispatchEntry(
        "meta_ads_create_campaign", a.PlatformCampaignArgs, _create_meta_campaign, fixed("meta")),
    "create_linkedin_campaign": DispatchEntry(
        "linkedin_ads_create_campaign_complete", a.CreateLinkedInCampaignArgs,
        _create_linkedin_campaign, fixed("linkedin")),
    "create_reddit_campaign": DispatchEntry(
        "reddit_ads_create_campaign", a.CreateRedditCampaignArgs,
        _create_reddit_campaign, fixed("reddit")),

    # Utility
    "list_ad_accounts": DispatchEntry(
        "google_ads_list_customers", a.NoArgs, _no_flags, fixed("google")),
    "upload_image": DispatchEntry(
        "google_ads_upload_image_asset", a.UploadImageArgs, _upload_image, from_args()),
    "run_tool": DispatchEntry(
        None, a.RunToolArgs, _run_tool, from_args(default=None)),
})


# ── entry point ──────────────────────────────────────────────────────────


def _describe(exc: ValidationError) -> list[str]:
    problems = []
    for err in exc.errors():
        where = ".".join(str(part) for part in err.get("loc", ())) or "arguments"
        problems.append(f"{where}: {err.get('msg', 'invalid')}")
    return problems


def parse_arguments(name: str, entry: DispatchEntry, arguments: Optional[Mapping[str, Any]]):
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise InvalidArgumentsError(name, ["arguments: must be an object"])
    try:
        return entry.arguments.model_validate(dict(arguments))
    except ValidationError as exc:
        raise InvalidArgumentsError(name, _describe(exc)) from exc


def build_request(name: str, arguments: Optional[Mapping[str, Any]] = None) -> RemoteRequest:
    """
    Resolve a tool invocation into the request sent to ``tools/run``.

    Raises UnknownToolError if ``name`` has no entry, InvalidArgumentsError
    if a required scalar is missing or mistyped. Nothing else is checked
    locally.
    """
    entry = DISPATCH.get(name)
    if entry is None:
        raise UnknownToolError(name)

    args = parse_arguments(name, entry, arguments)
    return RemoteRequest(
        script_name=entry.resolve_script(args),
        args=tuple(entry.mapper(args)),
        platform=entry.platform(args),
    )
