"""Shared route fixtures.

``route_meta`` is the reference route tree as discovery would hand it
over; ``views_dir`` lays out the same tree as view files on disk.
"""

from pathlib import Path

import pytest

from fileroutes.routing.route import ModuleRef, RouteMeta


def titled(title: str | None = None) -> ModuleRef:
    """A module whose only export of interest is *title*."""
    return ModuleRef(exports={"title": title} if title is not None else {})


@pytest.fixture
def route_meta() -> tuple[RouteMeta, ...]:
    return (
        RouteMeta("about", view=titled("About")),
        RouteMeta(
            "profile",
            children=(
                RouteMeta("", view=titled("Profile")),
                RouteMeta(
                    "account",
                    layout=titled("Account"),
                    children=(
                        RouteMeta(
                            "security",
                            children=(
                                RouteMeta("password", view=titled("Password")),
                                RouteMeta("two-factor-auth", view=titled("Two Factor Auth")),
                            ),
                        ),
                    ),
                ),
                RouteMeta(
                    "friends",
                    layout=titled("Friends Layout"),
                    children=(
                        RouteMeta("list", view=titled("List")),
                        RouteMeta(":user", view=titled("User")),
                    ),
                ),
            ),
        ),
        RouteMeta(
            "test",
            children=(
                RouteMeta(":optional?", view=titled("Optional")),
                RouteMeta("*", view=titled("Wildcard")),
                RouteMeta(
                    "issue-002378",
                    children=(
                        RouteMeta(
                            ":requiredParam",
                            children=(
                                RouteMeta("edit", view=titled("Issue002378 Required Param")),
                            ),
                        ),
                    ),
                ),
                RouteMeta(
                    "issue-002571-empty-layout",
                    layout=titled("Issue002571 Empty Layout"),
                    children=(),
                ),
                RouteMeta("issue-002879-config-below", view=titled("Config Below")),
            ),
        ),
        RouteMeta("layout-only", layout=titled("Layout Only")),
    )


VIEW_FILES: dict[str, str] = {
    "about.tsx": "export default function About() {};",
    "profile/@index.tsx": "export default function Profile() {};",
    "profile/index.md": "# Profile",
    "profile/account/@layout.tsx": (
        "export const config = { title: 'Account' };\n"
        "export default function AccountLayout() {};"
    ),
    "profile/account/security/password.jsx": (
        "export const config = { title: 'Password' };\n"
        "export default function Password() {};"
    ),
    "profile/account/security/two-factor-auth.ts": "export default function TwoFactorAuth() {};",
    "profile/friends/@layout.tsx": "export default function FriendsLayout() {};",
    "profile/friends/list.js": "export default function List() {};",
    "profile/friends/{user}.tsx": "export default function User() {};",
    "test/{{optional}}.tsx": "export default function Optional() {};",
    "test/{...wildcard}.tsx": "export default function Wildcard() {};",
    "test/issue-002378/{requiredParam}/edit.tsx": (
        "export default function Issue002378RequiredParam() {};"
    ),
    "test/issue-002571-empty-layout/@layout.tsx": (
        "export default function Issue002571EmptyLayout() {};"
    ),
    "test/issue-002879-config-below.tsx": (
        "export default function Issue002879ConfigBelow() {};\n"
        "export const config = { title: 'Config Below' };"
    ),
    "layout-only/@layout.tsx": "export default function LayoutOnly() {};",
    "_private/ignored.tsx": "export default function Ignored() {};",
}


def write_views(root: Path, files: dict[str, str]) -> Path:
    """Create view files under *root* and return it."""
    for name, source in files.items():
        file = root / name
        file.parent.mkdir(parents=True, exist_ok=True)
        file.write_text(source, encoding="utf-8")
    return root


@pytest.fixture
def views_dir(tmp_path: Path) -> Path:
    return write_views(tmp_path / "views", VIEW_FILES)
