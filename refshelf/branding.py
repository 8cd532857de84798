"""Centralized branding constants — single source of truth for version."""


class AppBranding:
    """Application identity constants."""

    APP_NAME = "RefShelf"
    MAINTAINERS = "The RefShelf developers"
    VERSION = "5.2"

    HOMEPAGE_URL = "https://www.refshelf.org"
    DONATION_URL = "https://donations.refshelf.org"
    GITHUB_URL = "https://github.com/refshelf/refshelf"
    LIBRARIES_URL = "https://github.com/refshelf/refshelf/blob/main/external-libraries.md"
    LICENSE_URL = "https://github.com/refshelf/refshelf/blob/main/LICENSE.md"
    CONTRIBUTORS_URL = "https://github.com/refshelf/refshelf/graphs/contributors"
    PRIVACY_POLICY_URL = "https://github.com/refshelf/refshelf/blob/main/PRIVACY.md"
    RELEASES_URL = "https://api.github.com/repos/refshelf/refshelf/releases?per_page=100"
    DOWNLOAD_URL = "https://www.refshelf.org/#download"

    @classmethod
    def window_title(cls) -> str:
        return f"{cls.APP_NAME}  v{cls.VERSION}"

    @classmethod
    def user_agent(cls) -> str:
        return f"{cls.APP_NAME}/{cls.VERSION}"
