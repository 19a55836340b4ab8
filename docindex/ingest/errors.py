from __future__ import annotations


class IndexBuildError(RuntimeError):
    """Base class for failures that abort an index build."""


class MissingTitleError(IndexBuildError):
    def __init__(self, slug: str, file: str) -> None:
        super().__init__(f"Missing title in {slug} frontmatter ({file})")
        self.slug = slug
        self.file = file


class FrontmatterError(IndexBuildError):
    def __init__(self, file: str, reason: str) -> None:
        super().__init__(f"Invalid frontmatter in {file}: {reason}")
        self.file = file
        self.reason = reason


class IncludeNotFoundError(IndexBuildError):
    """Raised when an include marker has no non-empty region in the generated sibling."""

    def __init__(self, name: str, slug: str, generated_key: str) -> None:
        super().__init__(f"Could not find include for {name} in {generated_key} (used by {slug})")
        self.name = name
        self.slug = slug
        self.generated_key = generated_key


class UnexpectedKeyError(IndexBuildError):
    def __init__(self, key: str, base: str) -> None:
        super().__init__(f"Key {key} is not under {base}/")
        self.key = key
        self.base = base


class DuplicateSlugError(IndexBuildError):
    def __init__(self, slug: str, first_key: str, second_key: str) -> None:
        super().__init__(f"Slug {slug} is produced by both {first_key} and {second_key}")
        self.slug = slug
        self.first_key = first_key
        self.second_key = second_key


class EmptyDocumentError(IndexBuildError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"Document {slug} has no body and no children")
        self.slug = slug


class UnknownAssetOwnerError(IndexBuildError):
    def __init__(self, key: str, slug: str | None) -> None:
        if slug is None:
            message = f"Asset {key} is not inside a +assets folder"
        else:
            message = f"Asset {key} belongs to unknown document {slug}"
        super().__init__(message)
        self.key = key
        self.slug = slug


__all__ = [
    "IndexBuildError",
    "MissingTitleError",
    "FrontmatterError",
    "IncludeNotFoundError",
    "DuplicateSlugError",
    "UnexpectedKeyError",
    "EmptyDocumentError",
    "UnknownAssetOwnerError",
]
