"""Static agent catalog.

Ten agents in three clusters, run in four phases:

Phase 1: STRATEGY (market, positioning, customer insight)
Phase 2: CREATIVE (visual system, voice, story)
Phase 3: GROWTH (content, campaign, automation)
Phase 4: MEASUREMENT (post-launch analytics)

Catalog order is significant: within a phase, agents appear after the agents
they depend on.
"""

from typing import Tuple

from contracts import AgentDescriptor, AgentLink, Cluster


def _links(*pairs: Tuple[str, str]) -> Tuple[AgentLink, ...]:
    return tuple(AgentLink(agent_id=agent_id, reason=reason) for agent_id, reason in pairs)


MARKET_ANALYZER = AgentDescriptor(
    agent_id="market-analyzer",
    name="Market Analyzer",
    cluster=Cluster.STRATEGY,
    keywords=(
        "market", "competitor", "swot", "gap", "opportunity",
        "analysis", "research", "trend", "benchmark", "threat",
    ),
    capabilities=(
        "Market Analysis",
        "SWOT Analysis",
        "Competitor Benchmarking",
        "Market Gap Identification",
        "Trend Analysis",
    ),
    forbidden_tasks=(
        "Positioning Strategy",
        "Financial Calculation",
        "Design",
        "Content Creation",
        "Automation",
    ),
    collaborators=("positioning-strategist", "customer-insight-specialist"),
    depends_on=(),
    required_by=_links(
        ("positioning-strategist", "Needs market position and opportunities to set brand positioning"),
        ("customer-insight-specialist", "Needs market context to analyse the customer journey"),
        ("visual-strategist", "Needs the competitor landscape to design a distinctive visual system"),
        ("content-creator", "Needs audience and trend data to write content that lands"),
    ),
    conflicts_with=_links(
        ("analytics-master", "Market Analyzer looks forward; Analytics Master measures and tracks"),
    ),
    execution_phase=1,
    required_inputs=(
        "Brand Context (Product Info)",
        "Target Audience Profile",
        "Business Goals",
        "Market Data (Optional)",
    ),
    expected_outputs=(
        "SWOT Analysis Report",
        "Competitor Benchmarking Report",
        "Market Opportunities & Gaps",
        "Risks & Threats Assessment",
        "Trend Insights",
    ),
    success_criteria=(
        "Data-backed analysis with sources",
        "Actionable insights, not generic statements",
        "Clear positioning opportunities identified",
        "Risk assessment included",
        "Competitor landscape mapped",
    ),
)

POSITIONING_STRATEGIST = AgentDescriptor(
    agent_id="positioning-strategist",
    name="Positioning Strategist",
    cluster=Cluster.STRATEGY,
    keywords=(
        "positioning", "usp", "value proposition", "differentiation",
        "brand promise", "unique", "value", "niche",
    ),
    capabilities=(
        "Brand Positioning",
        "Value Proposition Development",
        "Differentiation Strategy",
        "Brand Promise",
        "Positioning Statement",
    ),
    forbidden_tasks=(
        "Market Research",
        "Design",
        "Content Writing",
        "Automation",
    ),
    collaborators=("market-analyzer", "customer-insight-specialist", "brand-voice-architect"),
    depends_on=_links(
        ("market-analyzer", "Needs market position and competitors to find a distinct position"),
    ),
    required_by=_links(
        ("customer-insight-specialist", "Needs brand positioning to define personas and KPIs"),
        ("visual-strategist", "Needs positioning to design a matching visual identity"),
        ("brand-voice-architect", "Needs positioning to define tone and voice"),
        ("automation-specialist", "Needs brand strategy to size automation workflows"),
    ),
    conflicts_with=_links(
        ("market-analyzer", "Market Analyzer analyses; Positioning Strategist sets direction"),
    ),
    execution_phase=1,
    required_inputs=(
        "Market Analysis Output",
        "SWOT Analysis",
        "Competitor Landscape",
        "Business Goals",
        "Target Audience Profile",
    ),
    expected_outputs=(
        "Brand Positioning Statement",
        "Value Proposition Canvas",
        "Differentiation Framework",
        "Brand Promise",
        "Competitive Positioning Map",
    ),
    success_criteria=(
        "Unique positioning, not a copy of a competitor",
        "Aligned with market opportunities",
        "Clear value proposition",
        "Defensible differentiation",
        "Emotionally resonant",
    ),
)

CUSTOMER_INSIGHT_SPECIALIST = AgentDescriptor(
    agent_id="customer-insight-specialist",
    name="Customer Insight Specialist",
    cluster=Cluster.STRATEGY,
    keywords=(
        "persona", "customer journey", "customer", "audience",
        "segmentation", "pain point", "touchpoint", "behavior",
    ),
    capabilities=(
        "Customer Journey Mapping",
        "Persona Development",
        "KPI Definition",
        "Audience Segmentation",
        "Pain Point Analysis",
    ),
    forbidden_tasks=(
        "Performance Reporting",
        "Design",
        "Content Creation",
        "Automation",
    ),
    collaborators=("market-analyzer", "positioning-strategist", "campaign-planner"),
    depends_on=_links(
        ("market-analyzer", "Needs market context and the target audience"),
        ("positioning-strategist", "Needs brand positioning to define consistent personas"),
    ),
    required_by=_links(
        ("campaign-planner", "Needs the customer journey to time the campaign"),
        ("analytics-master", "Needs the KPI definitions to build the measurement framework"),
    ),
    conflicts_with=_links(
        ("analytics-master", "Customer Insight works before launch; Analytics Master after launch"),
    ),
    execution_phase=1,
    required_inputs=(
        "Market Analysis Output",
        "Brand Positioning",
        "Target Audience Profile",
        "Business Goals",
        "Historical Customer Data (Optional)",
    ),
    expected_outputs=(
        "Customer Journey Map",
        "Detailed Buyer Personas",
        "KPI Framework",
        "Audience Segmentation Report",
        "Pain Point & Motivation Analysis",
    ),
    success_criteria=(
        "Personas are data-grounded, not guessed",
        "Journey map covers all touchpoints",
        "KPIs are measurable and specific",
        "Segments are actionable",
        "Insights link to positioning",
    ),
)

VISUAL_STRATEGIST = AgentDescriptor(
    agent_id="visual-strategist",
    name="Visual Strategist",
    cluster=Cluster.CREATIVE,
    keywords=(
        "design", "logo", "visual", "color", "palette", "typography",
        "layout", "mood board", "ui", "ux", "icon",
    ),
    capabilities=(
        "Visual System Design",
        "Color Palette Strategy",
        "Typography System",
        "Logo & Corporate Identity",
        "Design Language",
    ),
    forbidden_tasks=(
        "Brand Strategy",
        "Financial Calculation",
        "Content Writing",
        "Automation",
    ),
    collaborators=("brand-voice-architect", "narrative-designer"),
    depends_on=_links(
        ("market-analyzer", "Needs market and competitor visuals to stand out"),
        ("positioning-strategist", "Needs positioning to express it through visual identity"),
    ),
    required_by=_links(
        ("brand-voice-architect", "Needs the visual system so voice matches visuals"),
        ("narrative-designer", "Needs the visual language to direct the story visually"),
    ),
    conflicts_with=_links(
        ("narrative-designer", "Visual Strategist owns static identity; Narrative Designer owns story and motion"),
    ),
    execution_phase=2,
    required_inputs=(
        "Market Analysis",
        "Brand Positioning",
        "Target Audience Aesthetic Preferences",
        "Competitor Visual Analysis",
        "Brand Personality",
    ),
    expected_outputs=(
        "Visual System Guidelines",
        "Color Palette & Psychology",
        "Typography System",
        "Logo & CI Design Direction",
        "Design Language & Mood Board",
    ),
    success_criteria=(
        "WCAG accessible color contrast",
        "Visually distinctive from competitors",
        "Consistent with brand positioning",
        "Scalable across all platforms",
        "Clear design rationale",
    ),
)

BRAND_VOICE_ARCHITECT = AgentDescriptor(
    agent_id="brand-voice-architect",
    name="Brand Voice Architect",
    cluster=Cluster.CREATIVE,
    keywords=(
        "tone", "voice", "personality", "brand language",
        "communication", "guidelines", "messaging", "do and don't",
    ),
    capabilities=(
        "Tone & Voice Definition",
        "Communication Rules",
        "Brand Language Framework",
        "Do/Don't Guidelines",
        "Voice Consistency Standards",
    ),
    forbidden_tasks=(
        "Caption Writing",
        "Design",
        "Financial Calculation",
        "Automation",
    ),
    collaborators=("positioning-strategist", "visual-strategist", "content-creator"),
    depends_on=_links(
        ("positioning-strategist", "Needs positioning to define a voice that reflects the brand"),
        ("visual-strategist", "Needs the visual tone so voice and visuals agree"),
    ),
    required_by=_links(
        ("narrative-designer", "Needs the voice to write a consistent story"),
        ("content-creator", "Needs the voice to write captions and scripts in the right tone"),
    ),
    conflicts_with=_links(
        ("content-creator", "Brand Voice Architect sets the rules; Content Creator applies them"),
    ),
    execution_phase=2,
    required_inputs=(
        "Brand Positioning",
        "Visual System Guidelines",
        "Target Audience Profile",
        "Brand Personality",
        "Competitor Voice Analysis",
    ),
    expected_outputs=(
        "Tone & Voice Guide",
        "Communication Rules Document",
        "Brand Language Framework",
        "Do/Don't Guidelines",
        "Voice Examples per Platform",
    ),
    success_criteria=(
        "Voice is unique and recognizable",
        "Rules are clear and actionable",
        "Covers all communication channels",
        "Aligned with visual identity",
        "Consistent across all contexts",
    ),
)

NARRATIVE_DESIGNER = AgentDescriptor(
    agent_id="narrative-designer",
    name="Narrative Designer",
    cluster=Cluster.CREATIVE,
    keywords=(
        "story", "storytelling", "narrative", "hero's journey",
        "video concept", "storyboard", "scene", "motion",
    ),
    capabilities=(
        "Brand Story Development",
        "Hero's Journey Framework",
        "Video Concept & Direction",
        "Storytelling Strategy",
        "Narrative Arc Planning",
    ),
    forbidden_tasks=(
        "Caption Writing",
        "Logo Design",
        "Financial Calculation",
        "Automation",
    ),
    collaborators=("visual-strategist", "brand-voice-architect", "content-creator"),
    depends_on=_links(
        ("brand-voice-architect", "Needs the voice to write the story in the right tone"),
        ("visual-strategist", "Needs the visual language for visual storytelling"),
    ),
    required_by=_links(
        ("content-creator", "Needs the story framework to give content a narrative"),
    ),
    conflicts_with=_links(
        ("content-creator", "Narrative Designer plans the story; Content Creator writes the content"),
        ("visual-strategist", "Visual Strategist owns static identity; Narrative Designer owns story and motion"),
    ),
    execution_phase=2,
    required_inputs=(
        "Brand Voice Guide",
        "Visual System Guidelines",
        "Brand Positioning",
        "Target Audience Personas",
        "Campaign Themes",
    ),
    expected_outputs=(
        "Brand Story Document",
        "Hero's Journey Framework",
        "Video Concept & Direction Plan",
        "Storytelling Templates",
        "Narrative Arc per Content Type",
    ),
    success_criteria=(
        "Story is emotionally compelling",
        "Aligned with brand voice",
        "Visual direction is actionable",
        "Hero's journey is complete",
        "Adaptable to multiple formats",
    ),
)

CONTENT_CREATOR = AgentDescriptor(
    agent_id="content-creator",
    name="Content Creator",
    cluster=Cluster.GROWTH,
    keywords=(
        "caption", "copy", "copywriting", "content", "hook",
        "cta", "hashtag", "emoji", "video script",
    ),
    capabilities=(
        "Caption Strategy & Writing",
        "Video Script Development",
        "Dual-Mode Content (Caption + Video)",
        "CTA Strategy",
        "Platform-Specific Content Optimization",
    ),
    forbidden_tasks=(
        "Brand Voice Definition",
        "Design",
        "Financial Calculation",
        "Market Analysis",
        "Automation",
    ),
    collaborators=("brand-voice-architect", "narrative-designer", "campaign-planner"),
    depends_on=_links(
        ("brand-voice-architect", "Needs the voice to write in the right tone"),
        ("narrative-designer", "Needs the story framework to give content a narrative"),
        ("market-analyzer", "Needs audience and trend data to write content that lands"),
    ),
    required_by=_links(
        ("campaign-planner", "Needs the content style before building the campaign calendar"),
    ),
    conflicts_with=_links(
        ("brand-voice-architect", "Brand Voice Architect sets the rules; Content Creator applies them"),
        ("narrative-designer", "Narrative Designer plans the story; Content Creator writes the content"),
    ),
    execution_phase=3,
    required_inputs=(
        "Brand Voice Guide",
        "Narrative & Story Framework",
        "Market Analysis & Trends",
        "Target Audience Personas",
        "Platform Guidelines",
    ),
    expected_outputs=(
        "Caption Strategy & Templates",
        "Video Script Outlines",
        "Dual-Mode Content Framework",
        "CTA Templates per Platform",
        "Content Style Guide",
    ),
    success_criteria=(
        "Voice is consistent with brand",
        "Dual-mode covers caption + video",
        "Platform-optimized",
        "Storytelling integrated",
        "CTAs are compelling and varied",
    ),
)

CAMPAIGN_PLANNER = AgentDescriptor(
    agent_id="campaign-planner",
    name="Campaign Planner",
    cluster=Cluster.GROWTH,
    keywords=(
        "campaign", "calendar", "content calendar", "schedule", "30 days",
        "timeline", "milestone", "promotion", "launch",
    ),
    capabilities=(
        "Campaign Timeline Planning",
        "Milestone Definition",
        "Content Calendar",
        "Promotion Strategy",
        "Schedule Optimization",
    ),
    forbidden_tasks=(
        "Design",
        "Financial Calculation",
        "Market Analysis",
        "Video Creation",
    ),
    collaborators=("content-creator", "automation-specialist", "analytics-master"),
    depends_on=_links(
        ("content-creator", "Needs content style and formats before planning the calendar"),
        ("customer-insight-specialist", "Needs the customer journey to hit the right touchpoints"),
    ),
    required_by=_links(
        ("automation-specialist", "Needs the campaign timeline before automating workflows"),
        ("analytics-master", "Needs the campaign plan to set measurement points"),
    ),
    conflicts_with=_links(
        ("content-creator", "Content Creator creates content; Campaign Planner schedules it"),
    ),
    execution_phase=3,
    required_inputs=(
        "Content Strategy & Templates",
        "Customer Journey Map",
        "KPI Framework",
        "Business Goals",
        "Platform-Specific Requirements",
    ),
    expected_outputs=(
        "Campaign Timeline (30/60/90 days)",
        "Milestone Definitions",
        "Content Calendar",
        "Content Mix Strategy",
        "Promotion & Posting Schedule",
    ),
    success_criteria=(
        "Timeline is realistic and actionable",
        "Milestones are measurable",
        "Balanced content mix",
        "Aligned with customer journey",
        "Execution-ready",
    ),
)

AUTOMATION_SPECIALIST = AgentDescriptor(
    agent_id="automation-specialist",
    name="Automation Specialist",
    cluster=Cluster.GROWTH,
    keywords=(
        "automation", "workflow", "scheduling", "make.com", "zapier",
        "webhook", "cron", "batch", "posting", "integration",
    ),
    capabilities=(
        "Workflow Design",
        "Tool Integration (Make.com, Zapier)",
        "Content Scheduling Automation",
        "Webhook Management",
        "Batch Processing Setup",
    ),
    forbidden_tasks=(
        "Design",
        "Content Writing",
        "Financial Calculation",
        "Market Analysis",
        "Brand Strategy",
    ),
    collaborators=("campaign-planner",),
    depends_on=_links(
        ("campaign-planner", "Needs the campaign timeline before setting up automation"),
        ("positioning-strategist", "Needs brand strategy to size workflows to the business"),
    ),
    required_by=(),
    conflicts_with=_links(
        ("campaign-planner", "Campaign Planner plans; Automation Specialist automates"),
    ),
    execution_phase=3,
    required_inputs=(
        "Campaign Timeline & Calendar",
        "Brand Positioning & Strategy",
        "Platform Credentials",
        "Webhook Endpoints",
        "Tool Integration Requirements",
    ),
    expected_outputs=(
        "Workflow Configurations",
        "Tool Integration Setup",
        "Automation Documentation",
        "Scheduling Rules & Triggers",
        "Error Handling & Monitoring Plan",
    ),
    success_criteria=(
        "Workflows run without errors",
        "Scheduling is precise and reliable",
        "Error handling is robust",
        "Monitoring & alerts are configured",
        "Integration is documented",
    ),
)

ANALYTICS_MASTER = AgentDescriptor(
    agent_id="analytics-master",
    name="Analytics Master",
    cluster=Cluster.GROWTH,
    keywords=(
        "analytics", "kpi", "dashboard", "metrics", "performance",
        "roi", "tracking", "report", "measurement", "monitoring",
    ),
    capabilities=(
        "KPI Dashboard Design",
        "Measurement Framework",
        "Performance Tracking Setup",
        "ROI Analysis",
        "Reporting & Recommendations",
    ),
    forbidden_tasks=(
        "Market Forecasting",
        "Design",
        "Content Creation",
        "Script Writing",
        "Automation",
    ),
    collaborators=("campaign-planner", "customer-insight-specialist"),
    depends_on=_links(
        ("campaign-planner", "Needs the campaign plan to set measurement points"),
        ("customer-insight-specialist", "Needs the KPI framework to build a complete dashboard"),
    ),
    required_by=(),
    conflicts_with=_links(
        ("customer-insight-specialist", "Customer Insight defines KPIs before launch; Analytics Master measures after"),
        ("market-analyzer", "Market Analyzer looks forward; Analytics Master measures performance"),
    ),
    execution_phase=4,
    required_inputs=(
        "Campaign Timeline & Milestones",
        "KPI Framework",
        "Customer Journey Map",
        "Business Goals",
        "Platform Analytics Access",
    ),
    expected_outputs=(
        "KPI Dashboard Design",
        "Measurement Framework Document",
        "Tracking Setup Guide",
        "ROI Analysis Templates",
        "Reporting Schedule & Format",
    ),
    success_criteria=(
        "All KPIs are tracked and measurable",
        "Dashboard is actionable, not vanity metrics",
        "Measurement aligns with business goals",
        "Reporting cadence is defined",
        "Recommendations are data-driven",
    ),
)


AGENT_CATALOG: Tuple[AgentDescriptor, ...] = (
    MARKET_ANALYZER,
    POSITIONING_STRATEGIST,
    CUSTOMER_INSIGHT_SPECIALIST,
    VISUAL_STRATEGIST,
    BRAND_VOICE_ARCHITECT,
    NARRATIVE_DESIGNER,
    CONTENT_CREATOR,
    CAMPAIGN_PLANNER,
    AUTOMATION_SPECIALIST,
    ANALYTICS_MASTER,
)
