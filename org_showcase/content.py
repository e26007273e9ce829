"""Hard-coded site copy: navigation, about cards, involvement cards and footer."""

from .config import ORG

GITHUB_ORG_URL = f"https://github.com/{ORG}"

NAV_LINKS = [
    {"href": "#about", "label": "About"},
    {"href": "#projects", "label": "Projects"},
    {"href": "#get-involved", "label": "Get Involved"},
]

ABOUT_FEATURES = [
    {
        "icon": "lucide:package",
        "title": "Package Stewardship",
        "description": "We adopt and maintain critical open source packages that the ecosystem depends on.",
    },
    {
        "icon": "lucide:users",
        "title": "Community Maintenance",
        "description": "A team of dedicated maintainers ensures libraries stay healthy and up to date.",
    },
    {
        "icon": "lucide:trending-up",
        "title": "Ecosystem Growth",
        "description": "We help the Elixir and Erlang ecosystem thrive by filling gaps and nurturing new projects.",
    },
    {
        "icon": "lucide:shield-check",
        "title": "Quality Standards",
        "description": "Projects follow consistent standards for testing, documentation, and release management.",
    },
]

INVOLVEMENT_CARDS = [
    {
        "icon": "lucide:git-pull-request",
        "title": "Contribute Code",
        "description": "Browse issues across our projects and submit pull requests. Every contribution matters.",
        "link_text": "Find issues",
        "link_url": f"https://github.com/orgs/{ORG}/repositories",
    },
    {
        "icon": "lucide:heart-handshake",
        "title": "Adopt a Project",
        "description": (
            "Have an Elixir or Erlang package the community depends on? We can help maintain it long-term."
        ),
        "link_text": "Get in touch",
        "link_url": f"{GITHUB_ORG_URL}/{ORG}.org/issues/new",
    },
    {
        "icon": "lucide:star",
        "title": "Spread the Word",
        "description": "Star our projects, share them with your team, and help us grow the BEAM community.",
        "link_text": "Visit GitHub",
        "link_url": GITHUB_ORG_URL,
    },
]

FOOTER_LINKS = [
    {"label": "GitHub", "url": GITHUB_ORG_URL, "icon": "simple-icons:github"},
    {"label": "Hex.pm", "url": "https://hex.pm", "icon": "simple-icons:elixir"},
    {"label": "Elixir Forum", "url": "https://elixirforum.com", "icon": "lucide:message-circle"},
    {"label": "Erlang Ecosystem Foundation", "url": "https://erlef.org", "icon": "lucide:globe"},
]
