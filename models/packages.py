"""
The fixed set of icon packages the build knows about.
"""

from __future__ import annotations

from models.schemas import LayoutKind, Package, PackageType, SourceLayout


def _flat(path: str, strip_prefix: str | None = None) -> SourceLayout:
    return SourceLayout(LayoutKind.VARIANT_DIRS, ((path, ""),), strip_prefix)


_CATALOG: dict[PackageType, Package] = {
    PackageType.ANT_DESIGN_ICONS: Package(
        ty=PackageType.ANT_DESIGN_ICONS,
        short_name="ai",
        name="Ant Design Icons",
        source="https://github.com/ant-design/ant-design-icons",
        layout=SourceLayout(
            LayoutKind.VARIANT_DIRS,
            (
                ("packages/icons-svg/svg/filled", "fill"),
                ("packages/icons-svg/svg/outlined", "outline"),
                ("packages/icons-svg/svg/twotone", "twotone"),
            ),
        ),
        license="MIT",
    ),
    PackageType.BOX_ICONS: Package(
        ty=PackageType.BOX_ICONS,
        short_name="bi",
        name="BoxIcons",
        source="https://github.com/atisawd/boxicons",
        layout=SourceLayout(
            LayoutKind.VARIANT_DIRS,
            (
                ("svg/regular", ""),
                ("svg/solid", "solid"),
                ("svg/logos", "logo"),
            ),
            strip_prefix=r"^bx[sl]?-",
        ),
        license="MIT",
    ),
    PackageType.BOOTSTRAP_ICONS: Package(
        ty=PackageType.BOOTSTRAP_ICONS,
        short_name="bs",
        name="Bootstrap Icons",
        source="https://github.com/twbs/icons",
        layout=_flat("icons"),
        git_ref="v1.10.5",
        license="MIT",
    ),
    PackageType.CSS_GG: Package(
        ty=PackageType.CSS_GG,
        short_name="cg",
        name="css.gg",
        source="https://github.com/astrit/css.gg",
        layout=_flat("icons/svg"),
        license="MIT",
    ),
    PackageType.FONT_AWESOME: Package(
        ty=PackageType.FONT_AWESOME,
        short_name="fa",
        name="Font Awesome",
        source="https://github.com/FortAwesome/Font-Awesome",
        layout=SourceLayout(
            LayoutKind.VARIANT_DIRS,
            (
                ("svgs/solid", ""),
                ("svgs/regular", "regular"),
                ("svgs/brands", "brand"),
            ),
        ),
        license="CC BY 4.0",
    ),
    PackageType.FEATHER: Package(
        ty=PackageType.FEATHER,
        short_name="fi",
        name="Feather",
        source="https://github.com/feathericons/feather",
        layout=_flat("icons"),
        git_ref="v4.29.1",
        license="MIT",
    ),
    PackageType.HERO_ICONS: Package(
        ty=PackageType.HERO_ICONS,
        short_name="hi",
        name="Heroicons",
        source="https://github.com/tailwindlabs/heroicons",
        layout=SourceLayout(
            LayoutKind.VARIANT_DIRS,
            (
                ("optimized/24/outline", "outline"),
                ("optimized/24/solid", "solid"),
                ("optimized/20/solid", "mini"),
            ),
        ),
        git_ref="v2.0.18",
        license="MIT",
    ),
    PackageType.ICO_MOON_FREE: Package(
        ty=PackageType.ICO_MOON_FREE,
        short_name="im",
        name="IcoMoon Free",
        source="https://github.com/Keyamoon/IcoMoon-Free",
        layout=_flat("SVG", strip_prefix=r"^\d+-"),
        license="CC BY 4.0",
    ),
    PackageType.IONICONS: Package(
        ty=PackageType.IONICONS,
        short_name="io",
        name="Ionicons",
        source="https://github.com/ionic-team/ionicons",
        layout=_flat("src/svg"),
        git_ref="v7.1.2",
        license="MIT",
    ),
    PackageType.LUCIDE: Package(
        ty=PackageType.LUCIDE,
        short_name="lu",
        name="Lucide",
        source="https://github.com/lucide-icons/lucide",
        layout=SourceLayout(LayoutKind.SIDECAR_JSON, (("icons", ""),)),
        license="ISC",
    ),
    PackageType.GITHUB_OCTICONS: Package(
        ty=PackageType.GITHUB_OCTICONS,
        short_name="oc",
        name="Github Octicons",
        source="https://github.com/primer/octicons",
        layout=_flat("icons"),
        license="MIT",
    ),
    PackageType.REMIX_ICON: Package(
        ty=PackageType.REMIX_ICON,
        short_name="ri",
        name="Remix Icon",
        source="https://github.com/Remix-Design/RemixIcon",
        layout=SourceLayout(LayoutKind.CATEGORY_DIRS, (("icons", ""),)),
        license="Apache 2.0",
    ),
    PackageType.SIMPLE_ICONS: Package(
        ty=PackageType.SIMPLE_ICONS,
        short_name="si",
        name="Simple Icons",
        source="https://github.com/simple-icons/simple-icons",
        layout=_flat("icons"),
        license="CC0 1.0",
    ),
    PackageType.TABLER_ICONS: Package(
        ty=PackageType.TABLER_ICONS,
        short_name="tb",
        name="Tabler Icons",
        source="https://github.com/tabler/tabler-icons",
        layout=_flat("icons"),
        license="MIT",
    ),
    PackageType.TYPICONS: Package(
        ty=PackageType.TYPICONS,
        short_name="ti",
        name="Typicons",
        source="https://github.com/stephenhutchings/typicons.font",
        layout=_flat("src/svg"),
        license="CC BY-SA 3.0",
    ),
    PackageType.VS_CODE_ICONS: Package(
        ty=PackageType.VS_CODE_ICONS,
        short_name="vs",
        name="VS Code Icons",
        source="https://github.com/microsoft/vscode-codicons",
        layout=_flat("src/icons"),
        license="CC BY 4.0",
    ),
    PackageType.WEATHER_ICONS: Package(
        ty=PackageType.WEATHER_ICONS,
        short_name="wi",
        name="Weather Icons",
        source="https://github.com/erikflowers/weather-icons",
        layout=_flat("svg", strip_prefix=r"^wi-"),
        license="SIL OFL 1.1",
    ),
}


def get_package(ty: PackageType | str) -> Package:
    return _CATALOG[PackageType(ty)]


def all_packages() -> list[Package]:
    """One package per known PackageType, in declaration order."""
    return [_CATALOG[ty] for ty in PackageType]
