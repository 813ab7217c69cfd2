"""
Synter MCP Tool Catalog (21 tools)

Campaign management (6):
  list_campaigns, create_search_campaign, create_display_campaign,
  create_pmax_campaign, pause_campaign, update_campaign_budget

Performance & analytics (2):
  get_performance, get_daily_spend

Keywords (2):
  add_keywords, add_negative_keywords

Conversion tracking (3):
  create_conversion, list_conversions, diagnose_tracking

Creative generation (2):
  generate_image, generate_video

Platform campaigns (3):
  create_meta_campaign, create_linkedin_campaign, create_reddit_campaign

Utility (3):
  list_ad_accounts, upload_image, run_tool

Names and schemas are a public contract for agents: renaming a tool or
changing a required field is a breaking change.
"""

from mcp.types import Tool, ToolAnnotations

PLATFORMS = ["google", "meta", "linkedin", "microsoft", "reddit", "tiktok", "x"]

READ_ONLY = ToolAnnotations(readOnlyHint=True)
DESTRUCTIVE = ToolAnnotations(destructiveHint=True)


def _string_list(description: str) -> dict:
    return {"type": "array", "items": {"type": "string"}, "description": description}


TOOLS: tuple[Tool, ...] = (
    # ── Campaign management ──────────────────────────────────────────────
    Tool(
        name="list_campaigns",
        description=(
            "List all campaigns across connected ad platforms. "
            "Returns campaign name, status, budget, and performance metrics."
        ),
        annotations=READ_ONLY,
        inputSchema={
            "type": "object",
            "properties": {
                "platform": {
                    "type": "string",
                    "enum": PLATFORMS,
                    "description": "Filter by platform (optional - lists all if not specified)",
                },
                "status": {
                    "type": "string",
                    "enum": ["ENABLED", "PAUSED", "REMOVED"],
                    "description": "Filter by campaign status",
                },
                "limit": {
                    "type": "number",
                    "description": "Maximum number of campaigns to return (default: 50)",
                },
            },
        },
    ),
    Tool(
        name="create_search_campaign",
        description=(
            "Create a Google Ads Search campaign with keywords. "
            "Sets up campaign, ad group, keywords, and responsive search ads."
        ),
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "campaign_name": {"type": "string", "description": "Name for the campaign"},
                "daily_budget": {"type": "number", "description": "Daily budget in USD"},
                "keywords": _string_list("Keywords to target (will be added as phrase match)"),
                "headlines": _string_list(
                    "Headlines for the responsive search ad (3-15, max 30 chars each)"
                ),
                "descriptions": _string_list(
                    "Descriptions for the responsive search ad (2-4, max 90 chars each)"
                ),
                "final_url": {"type": "string", "description": "Landing page URL"},
                "geo_targets": _string_list("Geo target codes (e.g., '2840' for US, '2826' for UK)"),
            },
            "required": [
                "campaign_name", "daily_budget", "keywords",
                "headlines", "descriptions", "final_url",
            ],
        },
    ),
    Tool(
        name="create_display_campaign",
        description=(
            "Create a Google Ads Display campaign with responsive display ads. "
            "Supports image uploads from URLs."
        ),
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "campaign_name": {"type": "string", "description": "Name for the campaign"},
                "daily_budget": {"type": "number", "description": "Daily budget in USD"},
                "landscape_image_url": {
                    "type": "string",
                    "description": "URL to 1200x628 landscape image",
                },
                "square_image_url": {
                    "type": "string",
                    "description": "URL to 1200x1200 square image",
                },
                "headlines": _string_list("Headlines (1-5, max 30 chars each)"),
                "descriptions": _string_list("Descriptions (1-5, max 90 chars each)"),
                "business_name": {"type": "string", "description": "Business name (max 25 chars)"},
                "final_url": {"type": "string", "description": "Landing page URL"},
                "geo_targets": _string_list("Geo target codes"),
            },
            "required": [
                "campaign_name", "daily_budget", "headlines",
                "descriptions", "business_name", "final_url",
            ],
        },
    ),
    Tool(
        name="create_pmax_campaign",
        description=(
            "Create a Google Ads Performance Max campaign. "
            "Requires images, headlines, descriptions, and a business name."
        ),
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "campaign_name": {"type": "string", "description": "Name for the campaign"},
                "daily_budget": {"type": "number", "description": "Daily budget in USD"},
                "headlines": _string_list("Headlines (3-15, max 30 chars each)"),
                "long_headline": {"type": "string", "description": "Long headline (max 90 chars)"},
                "descriptions": _string_list("Descriptions (2-5, max 90 chars each)"),
                "business_name": {"type": "string", "description": "Business name (max 25 chars)"},
                "final_url": {"type": "string", "description": "Landing page URL"},
                "landscape_image_url": {
                    "type": "string",
                    "description": "URL to 1200x628 landscape image",
                },
                "square_image_url": {
                    "type": "string",
                    "description": "URL to 1200x1200 square image",
                },
                "logo_url": {"type": "string", "description": "URL to square logo (min 128x128)"},
                "geo_targets": _string_list("Geo target codes"),
                "target_cpa": {"type": "number", "description": "Target CPA in USD (optional)"},
            },
            "required": [
                "campaign_name", "daily_budget", "headlines", "long_headline",
                "descriptions", "business_name", "final_url",
            ],
        },
    ),
    Tool(
        name="pause_campaign",
        description="Pause a campaign by ID. Works across all connected platforms.",
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "campaign_id": {
                    "type": "string",
                    "description": "Campaign ID (platform-specific format)",
                },
                "platform": {"type": "string", "enum": PLATFORMS, "description": "Ad platform"},
            },
            "required": ["campaign_id", "platform"],
        },
    ),
    Tool(
        name="update_campaign_budget",
        description="Update the daily budget for a campaign.",
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "campaign_id": {"type": "string", "description": "Campaign ID"},
                "platform": {"type": "string", "enum": PLATFORMS, "description": "Ad platform"},
                "daily_budget": {"type": "number", "description": "New daily budget in USD"},
            },
            "required": ["campaign_id", "platform", "daily_budget"],
        },
    ),
    # ── Performance & analytics ──────────────────────────────────────────
    Tool(
        name="get_performance",
        description=(
            "Get performance metrics (impressions, clicks, spend, conversions, ROAS) "
            "for campaigns."
        ),
        annotations=READ_ONLY,
        inputSchema={
            "type": "object",
            "properties": {
                "platform": {
                    "type": "string",
                    "enum": PLATFORMS,
                    "description": "Filter by platform (optional)",
                },
                "campaign_id": {
                    "type": "string",
                    "description": "Filter by specific campaign ID (optional)",
                },
                "date_range": {
                    "type": "string",
                    "enum": [
                        "TODAY", "YESTERDAY", "LAST_7_DAYS",
                        "LAST_30_DAYS", "THIS_MONTH", "LAST_MONTH",
                    ],
                    "description": "Date range for metrics (default: LAST_7_DAYS)",
                },
            },
        },
    ),
    Tool(
        name="get_daily_spend",
        description="Get daily spend breakdown across all connected ad accounts.",
        annotations=READ_ONLY,
        inputSchema={
            "type": "object",
            "properties": {
                "days": {"type": "number", "description": "Number of days to look back (default: 7)"},
                "platform": {
                    "type": "string",
                    "enum": PLATFORMS,
                    "description": "Filter by platform (optional)",
                },
            },
        },
    ),
    # ── Keywords ─────────────────────────────────────────────────────────
    Tool(
        name="add_keywords",
        description="Add keywords to a Google Ads campaign or ad group.",
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "ad_group_id": {"type": "string", "description": "Ad group ID to add keywords to"},
                "keywords": _string_list("Keywords to add"),
                "match_type": {
                    "type": "string",
                    "enum": ["EXACT", "PHRASE", "BROAD"],
                    "description": "Keyword match type (default: PHRASE)",
                },
            },
            "required": ["ad_group_id", "keywords"],
        },
    ),
    Tool(
        name="add_negative_keywords",
        description="Add negative keywords to block unwanted search terms.",
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "campaign_id": {"type": "string", "description": "Campaign ID"},
                "keywords": _string_list("Negative keywords to add"),
                "level": {
                    "type": "string",
                    "enum": ["CAMPAIGN", "AD_GROUP"],
                    "description": "Level to apply negatives (default: CAMPAIGN)",
                },
            },
            "required": ["campaign_id", "keywords"],
        },
    ),
    # ── Conversion tracking ──────────────────────────────────────────────
    Tool(
        name="create_conversion",
        description=(
            "Create a conversion action in Google Ads. "
            "Returns the conversion ID and label for GTM setup."
        ),
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "Name for the conversion action (e.g., 'Signup', 'Purchase')",
                },
                "value": {
                    "type": "number",
                    "description": "Default conversion value in USD (optional)",
                },
                "category": {
                    "type": "string",
                    "enum": [
                        "PURCHASE", "SIGNUP", "LEAD", "PAGE_VIEW",
                        "ADD_TO_CART", "DOWNLOAD", "OTHER",
                    ],
                    "description": "Conversion category (default: LEAD)",
                },
            },
            "required": ["name"],
        },
    ),
    Tool(
        name="list_conversions",
        description="List all conversion actions configured in Google Ads.",
        annotations=READ_ONLY,
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name="diagnose_tracking",
        description=(
            "Check if conversion tracking is properly set up on a website. "
            "Verifies gtag.js, GTM, and pixel installation."
        ),
        annotations=READ_ONLY,
        inputSchema={
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": "Website URL to check"},
            },
            "required": ["url"],
        },
    ),
    # ── Creative generation ──────────────────────────────────────────────
    Tool(
        name="generate_image",
        description="Generate an AI image for ad creatives using Imagen 4, Flux, or Stable Diffusion.",
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "prompt": {
                    "type": "string",
                    "description": "Image generation prompt (be specific about style, layout, colors)",
                },
                "size": {
                    "type": "string",
                    "enum": ["1200x628", "1200x1200", "1080x1080", "1920x1080"],
                    "description": "Image dimensions (default: 1200x628 for display ads)",
                },
                "provider": {
                    "type": "string",
                    "enum": ["imagen", "flux", "sdxl"],
                    "description": "AI provider (default: imagen)",
                },
                "name": {"type": "string", "description": "Asset name for organization"},
            },
            "required": ["prompt"],
        },
    ),
    Tool(
        name="generate_video",
        description=(
            "Generate an AI video ad using Veo, Runway, or Luma. "
            "Great for YouTube and social ads."
        ),
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "concept": {
                    "type": "string",
                    "enum": ["pas", "aida", "before_after", "testimonial", "demo", "execute"],
                    "description": "Video concept framework (default: pas = Problem-Agitate-Solve)",
                },
                "product_name": {"type": "string", "description": "Product or brand name"},
                "target_audience": {"type": "string", "description": "Who is this video for?"},
                "key_benefit": {"type": "string", "description": "Main value proposition"},
                "duration": {
                    "type": "number",
                    "enum": [6, 8, 15, 30],
                    "description": "Video duration in seconds (default: 8)",
                },
                "provider": {
                    "type": "string",
                    "enum": ["veo", "runway", "luma", "creatify"],
                    "description": "AI provider (default: veo)",
                },
            },
            "required": ["product_name", "key_benefit"],
        },
    ),
    # ── Meta (Facebook/Instagram) ────────────────────────────────────────
    Tool(
        name="create_meta_campaign",
        description="Create a Meta (Facebook/Instagram) advertising campaign.",
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Campaign name"},
                "objective": {
                    "type": "string",
                    "enum": ["CONVERSIONS", "TRAFFIC", "LEADS", "AWARENESS", "ENGAGEMENT"],
                    "description": "Campaign objective",
                },
                "daily_budget": {"type": "number", "description": "Daily budget in USD"},
            },
            "required": ["name", "objective", "daily_budget"],
        },
    ),
    # ── LinkedIn ─────────────────────────────────────────────────────────
    Tool(
        name="create_linkedin_campaign",
        description="Create a LinkedIn Ads campaign for B2B advertising.",
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Campaign name"},
                "objective": {
                    "type": "string",
                    "enum": [
                        "WEBSITE_VISIT", "LEAD_GENERATION", "ENGAGEMENT",
                        "VIDEO_VIEW", "BRAND_AWARENESS",
                    ],
                    "description": "Campaign objective",
                },
                "daily_budget": {"type": "number", "description": "Daily budget in USD"},
                "target_company_sizes": {
                    "type": "array",
                    "items": {"type": "string"},
                    "enum": [
                        "1-10", "11-50", "51-200", "201-500",
                        "501-1000", "1001-5000", "5001-10000", "10001+",
                    ],
                    "description": "Target company sizes",
                },
                "target_industries": _string_list("Target industries (LinkedIn industry codes)"),
                "target_job_functions": _string_list(
                    "Target job functions (e.g., 'Marketing', 'Engineering', 'Sales')"
                ),
            },
            "required": ["name", "objective", "daily_budget"],
        },
    ),
    # ── Reddit ───────────────────────────────────────────────────────────
    Tool(
        name="create_reddit_campaign",
        description="Create a Reddit Ads campaign for community-based advertising.",
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Campaign name"},
                "objective": {
                    "type": "string",
                    "enum": ["TRAFFIC", "CONVERSIONS", "VIDEO_VIEWS", "APP_INSTALLS", "REACH"],
                    "description": "Campaign objective",
                },
                "daily_budget": {"type": "number", "description": "Daily budget in USD"},
                "subreddits": _string_list(
                    "Subreddits to target (optional - omit for interest-based targeting)"
                ),
                "interests": _string_list("Interest categories to target"),
            },
            "required": ["name", "objective", "daily_budget"],
        },
    ),
    # ── Utility ──────────────────────────────────────────────────────────
    Tool(
        name="list_ad_accounts",
        description="List all connected ad accounts across platforms.",
        annotations=READ_ONLY,
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name="upload_image",
        description="Upload an image as an asset for use in ads.",
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "image_url": {"type": "string", "description": "URL of the image to upload"},
                "asset_name": {"type": "string", "description": "Name for the asset"},
                "platform": {
                    "type": "string",
                    "enum": ["google", "meta", "linkedin"],
                    "description": "Target platform (default: google)",
                },
            },
            "required": ["image_url", "asset_name"],
        },
    ),
    Tool(
        name="run_tool",
        description=(
            "Run any Synter tool by name. Use this for advanced operations not covered "
            "by other tools. See docs.syntermedia.ai for full tool list."
        ),
        annotations=DESTRUCTIVE,
        inputSchema={
            "type": "object",
            "properties": {
                "script_name": {
                    "type": "string",
                    "description": "Name of the tool to run (e.g., 'google_ads_list_audiences')",
                },
                "args": _string_list("Arguments to pass to the tool"),
                "platform": {
                    "type": "string",
                    "description": "Platform for OAuth credentials (google, meta, linkedin, etc.)",
                },
            },
            "required": ["script_name"],
        },
    ),
)

TOOL_NAMES: tuple[str, ...] = tuple(t.name for t in TOOLS)
