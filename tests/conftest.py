"""Shared fixtures: an in-memory document store and sample data."""

import pytest

from monoid_docs.core.errors import DocumentStoreError
from monoid_docs.models.domain.documents import Document, Organization, Repository

ORG_ID = "11111111-1111-1111-1111-111111111111"
OTHER_ORG_ID = "22222222-2222-2222-2222-222222222222"
REPO_ID = "33333333-3333-3333-3333-333333333333"


class FakeDocumentStore:
    """In-memory DocumentStore used by the unit tests."""

    def __init__(self, organizations=None, documents=None, repos=None, blobs=None):
        self.organizations = list(organizations or [])
        self.documents = list(documents or [])
        self.repos = {repo.id: repo for repo in repos or []}
        self.blobs = dict(blobs or {})
        self.failures: dict[str, Exception] = {}
        self.calls: list[tuple] = []

    def fail(self, operation: str, message: str = "connection refused") -> None:
        self.failures[operation] = DocumentStoreError(message)

    def _record(self, operation: str, *args) -> None:
        self.calls.append((operation, *args))
        if operation in self.failures:
            raise self.failures[operation]

    def _published(self, organization_id: str) -> list[Document]:
        docs = [
            doc
            for doc in self.documents
            if doc.organization_id == organization_id and doc.is_published
        ]
        return sorted(docs, key=lambda doc: doc.order_index)

    async def find_organization_by_slug(self, slug):
        self._record("find_organization_by_slug", slug)
        return next((org for org in self.organizations if org.slug == slug), None)

    async def list_published_documents(self, organization_id):
        self._record("list_published_documents", organization_id)
        return self._published(organization_id)

    async def get_published_document(self, organization_id, slug):
        self._record("get_published_document", organization_id, slug)
        return next(
            (doc for doc in self._published(organization_id) if doc.slug == slug), None
        )

    async def get_document_blob(self, organization_id, slug):
        self._record("get_document_blob", organization_id, slug)
        return self.blobs.get(f"{organization_id}/{slug}.md")

    async def search_published_documents(self, organization_id, query, limit=10):
        self._record("search_published_documents", organization_id, query, limit)
        needle = query.lower()
        matches = [
            doc
            for doc in self._published(organization_id)
            if needle in doc.title.lower()
            or needle in doc.content.lower()
            or needle in (doc.description or "").lower()
        ]
        return matches[:limit]

    async def resolve_repos(self, repo_ids):
        self._record("resolve_repos", list(repo_ids))
        return {repo_id: self.repos[repo_id] for repo_id in repo_ids if repo_id in self.repos}


def make_doc(slug, order_index=0, **kwargs) -> Document:
    """Build a published document of the sample organization."""
    defaults = {
        "id": f"doc-{slug}",
        "organization_id": ORG_ID,
        "title": slug.replace("-", " ").title(),
        "content": f"Content of {slug}",
        "is_published": True,
    }
    defaults.update(kwargs)
    return Document(slug=slug, order_index=order_index, **defaults)


@pytest.fixture
def organization():
    return Organization(id=ORG_ID, name="Monoid", slug="monoidyc")


@pytest.fixture
def other_organization():
    return Organization(id=OTHER_ORG_ID, name="Other Co", slug="other")


@pytest.fixture
def repository():
    return Repository(id=REPO_ID, name="engine", owner="monoid")


@pytest.fixture
def documents():
    return [
        make_doc(
            "getting-started",
            order_index=2,
            description="First steps with Monoid",
            content="Install the CLI and run the setup wizard.",
            repo_id=REPO_ID,
        ),
        make_doc(
            "overview",
            order_index=1,
            content="Monoid maps your code into a dependency graph.",
        ),
        make_doc("drafts", order_index=0, is_published=False, content="Unreleased notes"),
        make_doc(
            "foreign",
            order_index=0,
            organization_id=OTHER_ORG_ID,
            content="Belongs to another organization",
        ),
    ]


@pytest.fixture
def store(organization, other_organization, repository, documents):
    return FakeDocumentStore(
        organizations=[organization, other_organization],
        documents=documents,
        repos=[repository],
    )


@pytest.fixture
def doc_factory():
    return make_doc


@pytest.fixture
def store_factory(organization):
    def factory(**kwargs):
        kwargs.setdefault("organizations", [organization])
        return FakeDocumentStore(**kwargs)

    return factory
