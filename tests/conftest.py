"""Shared test fixtures: in-memory repositories behind a fake unit of work."""
from __future__ import annotations

import dataclasses
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from functools import cmp_to_key
from typing import Any
from uuid import UUID

import pytest

from commerce_service.application.dto.package import CreatePackageDTO
from commerce_service.application.dto.principal import Principal
from commerce_service.application.dto.product import CreateProductDTO, UpdateProductDTO
from commerce_service.application.exceptions import StoreError, StoreErrorKind
from commerce_service.application.pagination import StoreQuery
from commerce_service.domain.entities.comment import Comment
from commerce_service.domain.entities.native_product import NativePackage, NativeProduct
from commerce_service.domain.entities.order import Order, OrderCustomer, OrderItemRef
from commerce_service.domain.entities.post import Post
from commerce_service.domain.entities.product import Package, Product
from commerce_service.domain.value_objects.enums import Region, Source

BASE_TS = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def principal() -> Principal:
    return Principal(user_id="user-1")


@pytest.fixture
def other_principal() -> Principal:
    return Principal(user_id="user-2")


def make_post(
    *,
    post_id: UUID | None = None,
    author_id: str = "user-1",
    like_count: int = 0,
    minutes: int = 0,
) -> Post:
    return Post(
        id=post_id or uuid.uuid4(),
        title="Kyoto in autumn",
        content="Go early.",
        like_count=like_count,
        author_id=author_id,
        created_at=BASE_TS + timedelta(minutes=minutes),
    )


def make_comment(
    post_id: UUID,
    *,
    parent_id: UUID | None = None,
    author_id: str = "user-1",
    minutes: int = 0,
) -> Comment:
    return Comment(
        id=uuid.uuid4(),
        content="Nice!",
        post_id=post_id,
        parent_id=parent_id,
        author_id=author_id,
        created_at=BASE_TS + timedelta(minutes=minutes),
    )


def make_product(product_id: int, *, region: str = Region.TW) -> Product:
    return Product(
        id=product_id,
        name=f"Product {product_id}",
        region=region,
        created_at=BASE_TS,
        updated_at=BASE_TS,
    )


def make_package(package_id: int, product_id: int, *, region: str = Region.TW) -> Package:
    return Package(
        id=package_id,
        name=f"Package {package_id}",
        region=region,
        product_id=product_id,
        created_at=BASE_TS,
        updated_at=BASE_TS,
    )


def make_native_product(
    native_id: str,
    *,
    source: str = Source.KKDAY,
    region: str = Region.TW,
    product_id: int | None = None,
    name: str | None = None,
    minutes: int = 0,
) -> NativeProduct:
    return NativeProduct(
        id=native_id,
        name=name or f"Native {native_id}",
        source=source,
        region=region,
        product_id=product_id,
        created_at=BASE_TS + timedelta(minutes=minutes),
        updated_at=BASE_TS,
    )


def make_native_package(
    native_id: str,
    *,
    source: str = Source.KKDAY,
    region: str = Region.TW,
) -> NativePackage:
    return NativePackage(
        id=native_id,
        name=f"Native package {native_id}",
        source=source,
        region=region,
        package_id=None,
        created_at=BASE_TS,
        updated_at=BASE_TS,
    )


def make_order(order_id: int, *, region: str = Region.TW) -> Order:
    return Order(
        id=order_id,
        status="CONFIRMED",
        quantity=1,
        customer=OrderCustomer(name="Amy", email="amy@example.com"),
        booked_at=BASE_TS,
        departure_at=BASE_TS + timedelta(days=3),
        native_id=f"ord-{order_id}",
        source=Source.KLOOK,
        region=region,
        product=OrderItemRef(id=None, name="Native tour"),
        package=OrderItemRef(id=None, name="Native ticket"),
        created_at=BASE_TS,
        updated_at=BASE_TS,
    )


def apply_query(rows: list[Any], query: StoreQuery, id_field: str = "id") -> list[Any]:
    """Same page semantics as the SQL store: sort, start at the anchor, skip, limit."""

    def compare(a: Any, b: Any) -> int:
        for key in query.sort:
            va, vb = getattr(a, key.field), getattr(b, key.field)
            if va == vb:
                continue
            if va is None:
                return -1 if key.nulls_first else 1
            if vb is None:
                return 1 if key.nulls_first else -1
            result = -1 if va < vb else 1
            return -result if key.descending else result
        return 0

    ordered = sorted(rows, key=cmp_to_key(compare))
    if query.cursor is not None:
        ids = [getattr(row, id_field) for row in ordered]
        if query.cursor not in ids:
            return []
        ordered = ordered[ids.index(query.cursor):]
    return ordered[query.skip:query.skip + query.limit]


@dataclass
class FakeStore:
    posts: dict[UUID, Post] = field(default_factory=dict)
    likes: set[tuple[UUID, str]] = field(default_factory=set)
    comments: dict[UUID, Comment] = field(default_factory=dict)
    products: dict[int, Product] = field(default_factory=dict)
    packages: dict[int, Package] = field(default_factory=dict)
    native_products: dict[tuple[str, str], NativeProduct] = field(default_factory=dict)
    native_packages: dict[tuple[str, str], NativePackage] = field(default_factory=dict)
    orders: dict[int, Order] = field(default_factory=dict)
    queries: list[StoreQuery] = field(default_factory=list)

    def add_post(self, post: Post) -> Post:
        self.posts[post.id] = post
        return post

    def add_comment(self, comment: Comment) -> Comment:
        self.comments[comment.id] = comment
        return comment

    def add_native_product(self, native: NativeProduct) -> NativeProduct:
        self.native_products[(native.id, native.source)] = native
        return native


@dataclass
class FakePostReader:
    _store: FakeStore

    async def get(self, post_id: UUID) -> Post:
        post = self._store.posts.get(post_id)
        if post is None or post.deleted_at is not None:
            raise StoreError(StoreErrorKind.NOT_FOUND)
        return post

    async def list_posts(self, query: StoreQuery) -> list[Post]:
        self._store.queries.append(query)
        rows = [p for p in self._store.posts.values() if p.deleted_at is None]
        if "author_id" in query.filters:
            rows = [p for p in rows if p.author_id == query.filters["author_id"]]
        return apply_query(rows, query)


@dataclass
class FakePostWriter:
    _store: FakeStore

    async def create(self, post: Post) -> Post:
        return self._store.add_post(post)

    async def soft_delete(self, post_id: UUID, ts: datetime) -> None:
        store = self._store
        store.posts[post_id] = dataclasses.replace(store.posts[post_id], deleted_at=ts)
        for comment in list(store.comments.values()):
            if comment.post_id == post_id and comment.deleted_at is None:
                store.comments[comment.id] = dataclasses.replace(comment, deleted_at=ts)

    async def add_like(self, post_id: UUID, user_id: str) -> None:
        if (post_id, user_id) in self._store.likes:
            raise StoreError(StoreErrorKind.DUPLICATED)
        self._store.likes.add((post_id, user_id))
        self._bump(post_id, 1)

    async def remove_like(self, post_id: UUID, user_id: str) -> None:
        if (post_id, user_id) not in self._store.likes:
            raise StoreError(StoreErrorKind.NOT_LIKED)
        self._store.likes.discard((post_id, user_id))
        self._bump(post_id, -1)

    def _bump(self, post_id: UUID, delta: int) -> None:
        post = self._store.posts[post_id]
        self._store.posts[post_id] = dataclasses.replace(post, like_count=post.like_count + delta)


@dataclass
class FakeCommentReader:
    _store: FakeStore

    async def get(self, comment_id: UUID) -> Comment:
        comment = self._store.comments.get(comment_id)
        if comment is None or comment.deleted_at is not None:
            raise StoreError(StoreErrorKind.NOT_FOUND)
        return comment

    async def list_comments(self, query: StoreQuery) -> list[Comment]:
        self._store.queries.append(query)
        parent_id = query.filters.get("parent_id")
        rows = [
            c
            for c in self._store.comments.values()
            if c.deleted_at is None
            and c.post_id == query.filters["post_id"]
            and c.parent_id == parent_id
        ]
        return apply_query(rows, query)


@dataclass
class FakeCommentWriter:
    _store: FakeStore

    async def create(self, comment: Comment) -> Comment:
        return self._store.add_comment(comment)

    async def soft_delete(self, comment_id: UUID, ts: datetime, *, with_replies: bool) -> None:
        for comment in list(self._store.comments.values()):
            hit = comment.id == comment_id or (with_replies and comment.parent_id == comment_id)
            if hit and comment.deleted_at is None:
                self._store.comments[comment.id] = dataclasses.replace(comment, deleted_at=ts)


@dataclass
class FakeProductReader:
    _store: FakeStore

    async def get(self, product_id: int, *, with_packages: bool = False) -> Product:
        product = self._store.products.get(product_id)
        if product is None:
            raise StoreError(StoreErrorKind.NOT_FOUND)
        return self._with_packages(product) if with_packages else product

    async def list_products(self, query: StoreQuery) -> list[Product]:
        self._store.queries.append(query)
        rows = [p for p in self._store.products.values() if p.region == query.filters["region"]]
        page = apply_query(rows, query)
        if query.filters.get("with_packages"):
            page = [self._with_packages(p) for p in page]
        return page

    def _with_packages(self, product: Product) -> Product:
        packages = tuple(
            sorted(
                (p for p in self._store.packages.values() if p.product_id == product.id),
                key=lambda p: p.id,
            )
        )
        return dataclasses.replace(product, packages=packages)


@dataclass
class FakeProductWriter:
    _store: FakeStore

    async def create(self, data: CreateProductDTO) -> Product:
        product = make_product(max(self._store.products, default=0) + 1, region=data.region)
        product = dataclasses.replace(product, name=data.name)
        self._store.products[product.id] = product
        return product

    async def update(self, product_id: int, data: UpdateProductDTO) -> None:
        product = self._store.products.get(product_id)
        if product is None:
            raise StoreError(StoreErrorKind.NOT_FOUND)
        changes = {k: v for k, v in (("name", data.name), ("region", data.region)) if v is not None}
        self._store.products[product_id] = dataclasses.replace(product, **changes)

    async def delete(self, product_id: int) -> None:
        if self._store.products.pop(product_id, None) is None:
            raise StoreError(StoreErrorKind.NOT_FOUND)

    async def link(self, product_id: int, native_product_id: str, source: str) -> None:
        self._set(native_product_id, source, product_id)

    async def unlink(self, product_id: int, native_product_id: str, source: str) -> None:
        native = self._store.native_products.get((native_product_id, source))
        if native is None or native.product_id != product_id:
            raise StoreError(StoreErrorKind.NATIVE_PRODUCT_NOT_FOUND)
        self._set(native_product_id, source, None)

    def _set(self, native_product_id: str, source: str, product_id: int | None) -> None:
        key = (native_product_id, source)
        native = self._store.native_products.get(key)
        if native is None:
            raise StoreError(StoreErrorKind.NATIVE_PRODUCT_NOT_FOUND)
        self._store.native_products[key] = dataclasses.replace(native, product_id=product_id)


@dataclass
class FakePackageReader:
    _store: FakeStore

    async def list_packages(self, query: StoreQuery) -> list[Package]:
        self._store.queries.append(query)
        rows = [p for p in self._store.packages.values() if p.region == query.filters["region"]]
        if "product_id" in query.filters:
            rows = [p for p in rows if p.product_id == query.filters["product_id"]]
        return apply_query(rows, query)


@dataclass
class FakePackageWriter:
    _store: FakeStore

    async def create(self, data: CreatePackageDTO) -> Package:
        if data.product_id not in self._store.products:
            raise StoreError(StoreErrorKind.PRODUCT_NOT_FOUND)
        package = make_package(
            max(self._store.packages, default=0) + 1, data.product_id, region=data.region
        )
        package = dataclasses.replace(package, name=data.name)
        self._store.packages[package.id] = package
        return package

    async def delete(self, package_id: int) -> None:
        if self._store.packages.pop(package_id, None) is None:
            raise StoreError(StoreErrorKind.NOT_FOUND)

    async def pair(self, package_id: int, native_package_id: str, source: str) -> None:
        if package_id not in self._store.packages:
            raise StoreError(StoreErrorKind.NOT_FOUND)
        key = (native_package_id, source)
        native = self._store.native_packages.get(key)
        if native is None:
            raise StoreError(StoreErrorKind.NATIVE_PACKAGE_NOT_FOUND)
        self._store.native_packages[key] = dataclasses.replace(native, package_id=package_id)


@dataclass
class FakeOrderReader:
    _store: FakeStore

    async def get(self, order_id: int) -> Order:
        order = self._store.orders.get(order_id)
        if order is None:
            raise StoreError(StoreErrorKind.NOT_FOUND)
        return order

    async def list_orders(self, query: StoreQuery) -> list[Order]:
        self._store.queries.append(query)
        rows = [o for o in self._store.orders.values() if o.region == query.filters["region"]]
        return apply_query(rows, query)


@dataclass
class FakeNativeProductReader:
    _store: FakeStore

    async def list_native_products(self, query: StoreQuery) -> list[NativeProduct]:
        self._store.queries.append(query)
        f = query.filters
        rows = [n for n in self._store.native_products.values() if n.region == f["region"]]
        if "source" in f:
            rows = [n for n in rows if n.source == f["source"]]
        if f.get("name"):
            rows = [n for n in rows if f["name"] in n.name]
        if "product_id" in f:
            rows = [n for n in rows if n.product_id == f["product_id"]]
        elif f.get("no_product_id"):
            rows = [n for n in rows if n.product_id is None]
        return apply_query(rows, query)


@dataclass
class FakeUoW:
    """In-memory UoW for unit and API tests."""

    store: FakeStore = field(default_factory=FakeStore)
    _committed: bool = False

    def __post_init__(self) -> None:
        self.posts = FakePostReader(self.store)
        self.posts_w = FakePostWriter(self.store)
        self.comments = FakeCommentReader(self.store)
        self.comments_w = FakeCommentWriter(self.store)
        self.products = FakeProductReader(self.store)
        self.products_w = FakeProductWriter(self.store)
        self.packages = FakePackageReader(self.store)
        self.packages_w = FakePackageWriter(self.store)
        self.orders = FakeOrderReader(self.store)
        self.native_products = FakeNativeProductReader(self.store)

    async def flush(self) -> None:
        pass

    async def commit(self) -> None:
        self._committed = True

    async def rollback(self) -> None:
        pass


@pytest.fixture
def uow() -> FakeUoW:
    return FakeUoW()


class FakeRedis:
    """The slice of ``redis.asyncio.Redis`` the cache uses, kept in a dict."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str, ex: int | None = None) -> None:
        self.data[key] = value
        self.ttls[key] = ex

    async def delete(self, *keys: str) -> int:
        return sum(self.data.pop(k, None) is not None for k in keys)

    async def flushdb(self) -> None:
        self.data.clear()
        self.ttls.clear()

    async def mget(self, keys: list[str]) -> list[str | None]:
        return [self.data.get(k) for k in keys]

    async def ping(self) -> bool:
        return True

    def pipeline(self, transaction: bool = True) -> FakePipeline:
        return FakePipeline(self)


class FakePipeline:
    def __init__(self, redis: FakeRedis) -> None:
        self._redis = redis
        self._ops: list[tuple[str, str, int | None]] = []

    async def __aenter__(self) -> FakePipeline:
        return self

    async def __aexit__(self, *exc: object) -> None:
        self._ops.clear()

    def set(self, key: str, value: str, ex: int | None = None) -> FakePipeline:
        self._ops.append((key, value, ex))
        return self

    async def execute(self) -> list[bool]:
        for key, value, ex in self._ops:
            await self._redis.set(key, value, ex=ex)
        return [True] * len(self._ops)


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()
