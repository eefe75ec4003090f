"""Map download sources to APK download URLs."""
from typing import Dict

from kiosk_qr.schema.models import DownloadSource, ReleaseDescriptor


class DownloadLocationMapper:
    """Maps a DownloadSource to the APK URL for a release."""

    # Templates are filled with the release descriptor's fields
    TEMPLATES = {
        DownloadSource.GITHUB: (
            "https://github.com/nktnet1/webview-kiosk/releases/download/"
            "{tag}/webview-kiosk.apk"
        ),
        DownloadSource.F_DROID: "https://f-droid.org/repo/{package_name}_{code}.apk",
        DownloadSource.IZZY_ON_DROID: (
            "https://apt.izzysoft.de/fdroid/repo/{package_name}_{code}.apk"
        ),
    }

    @staticmethod
    def resolve(source: DownloadSource, release: ReleaseDescriptor) -> str:
        """
        Get the download URL for a source.

        Args:
            source: Download source (enum member or its value)
            release: Release the URL points at

        Returns:
            str: APK download URL

        Raises:
            ValueError: If source is not a known DownloadSource
        """
        if release is None:
            raise ValueError("A release descriptor is required to resolve a download location")

        template = DownloadLocationMapper.TEMPLATES[DownloadSource(source)]
        return template.format(
            tag=release.tag,
            code=release.code,
            package_name=release.package_name,
        )

    @staticmethod
    def resolve_all(release: ReleaseDescriptor) -> Dict[DownloadSource, str]:
        """Download URL for every source, in enum order."""
        return {
            source: DownloadLocationMapper.resolve(source, release)
            for source in DownloadSource
        }
