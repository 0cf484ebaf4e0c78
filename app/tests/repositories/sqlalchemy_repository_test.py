"""
通用仓储测试

直接使用内存 SQLite 会话，验证逻辑删除过滤、审计时间、分页窗口和条件构造
"""
from datetime import datetime
from decimal import Decimal

import pytest

from app.infrastructure.exceptions import StorageFailure
from app.models import Category, Good, User
from app.models.base import DEL_FLAG_DELETED
from app.repositories import AuditStamper, QuerySpec, SQLAlchemyRepository


@pytest.fixture
def goods(db, stamper):
    return SQLAlchemyRepository(Good, db, stamper)


def _good(name="Pen", price="1.50", stock=10, **kwargs):
    return Good(name=name, price=Decimal(price), stock=stock, **kwargs)


def insert_stamps_audit_pair_test(goods, clock):
    start = clock.current

    good = goods.insert(_good()).unwrap()

    assert good.id is not None
    assert good.deleted == 0
    assert good.create_time == start
    assert good.update_time == good.create_time


def update_refreshes_only_update_time_test(db, goods):
    good = goods.insert(_good()).unwrap()
    db.commit()
    created = good.create_time

    good.stock = 3
    assert goods.update(good) == 1
    db.commit()

    db.expire_all()
    reloaded = goods.find_by_id(good.id)
    assert reloaded.stock == 3
    assert reloaded.create_time == created
    assert reloaded.update_time > created


def soft_delete_hides_entity_test(db, goods):
    """
    逻辑删除

    测试场景：
    1. 删除影响1行，之后按ID查询、列表、计数都看不到
    2. 再次删除影响0行
    3. 行仍在表中，deleted=1 且 update_time 被刷新
    """
    good = goods.insert(_good()).unwrap()
    db.commit()

    assert goods.soft_delete(good.id) == 1
    db.commit()

    assert goods.find_by_id(good.id) is None
    assert goods.list() == []
    assert goods.count() == 0
    assert goods.soft_delete(good.id) == 0

    db.expire_all()
    row = db.query(Good).filter(Good.id == good.id).one()
    assert row.deleted == DEL_FLAG_DELETED
    assert row.update_time > row.create_time


def update_after_concurrent_delete_affects_nothing_test(db, goods):
    """实体加载后被删除，更新影响0行"""
    good = goods.insert(_good()).unwrap()
    db.commit()
    loaded = goods.find_by_id(good.id)

    goods.soft_delete(good.id)
    loaded.stock = 99

    assert goods.update(loaded) == 0


def update_missing_id_affects_nothing_test(goods):
    ghost = _good()
    ghost.id = 424242

    assert goods.update(ghost) == 0


def page_returns_window_test(goods):
    ids = [goods.insert(_good(name=f"Pen {i}")).unwrap().id for i in range(7)]
    spec = QuerySpec().order_by_asc("id")

    records, total = goods.page(spec, 2, 3)
    assert [g.id for g in records] == ids[3:6]
    assert total == 7

    records, total = goods.page(spec, 3, 3)
    assert [g.id for g in records] == ids[6:]

    records, total = goods.page(spec, 4, 3)
    assert records == []
    assert total == 7


def page_rejects_invalid_arguments_test(goods):
    with pytest.raises(ValueError):
        goods.page(None, 0, 10)
    with pytest.raises(ValueError):
        goods.page(None, 1, 0)


def query_spec_conditions_test(goods):
    cheap = goods.insert(_good(name="Pencil", price="0.80")).unwrap()
    pen = goods.insert(_good(name="Pen", price="1.50")).unwrap()
    goods.insert(_good(name="Notebook", price="5.00")).unwrap()

    found = goods.list(QuerySpec().ge("price", Decimal("0.50")).le("price", Decimal("2.00")).order_by_desc("price"))
    assert [g.id for g in found] == [pen.id, cheap.id]

    found = goods.list(QuerySpec().like("name", "Pen").ne("id", cheap.id))
    assert [g.id for g in found] == [pen.id]

    assert goods.count(QuerySpec().eq("name", "Notebook")) == 1


def like_escapes_wildcards_test(goods):
    goods.insert(_good(name="100% cotton")).unwrap()
    goods.insert(_good(name="1000 cotton")).unwrap()

    found = goods.list(QuerySpec().like("name", "100%"))

    assert [g.name for g in found] == ["100% cotton"]


def unknown_field_rejected_test(goods):
    with pytest.raises(ValueError):
        goods.list(QuerySpec().eq("colour", "red"))
    with pytest.raises(ValueError):
        goods.list(QuerySpec().order_by_asc("colour"))


def count_by_unique_field_test(db, stamper):
    users = SQLAlchemyRepository(User, db, stamper)
    alice = users.insert(User(username="alice")).unwrap()
    bob = users.insert(User(username="bob")).unwrap()

    assert users.count_by_unique_field("username", "alice") == 1
    assert users.count_by_unique_field("username", "alice", exclude_id=alice.id) == 0
    assert users.count_by_unique_field("username", "carol") == 0

    users.soft_delete(bob.id)
    assert users.count_by_unique_field("username", "bob") == 0


def insert_constraint_violation_is_storage_failure_test(db, stamper):
    users = SQLAlchemyRepository(User, db, stamper)
    users.insert(User(username="alice")).unwrap()

    result = users.insert(User(username="alice"))

    assert result.is_failure
    assert isinstance(result.failure, StorageFailure)
    db.rollback()


def store_key_ignores_deleted_rows_test(db, stamper):
    """
    数据库唯一约束只约束未删除用户

    绕过应用层检查直接写入：已删除用户的用户名可以再次插入，
    两个未删除用户同名仍被约束拦截
    """
    users = SQLAlchemyRepository(User, db, stamper)
    alice = users.insert(User(username="alice")).unwrap()
    users.soft_delete(alice.id)

    again = users.insert(User(username="alice"))
    assert again.is_ok
    db.commit()

    bob = users.insert(User(username="bob")).unwrap()
    db.commit()
    users.soft_delete(again.value.id)
    bob.username = "alice"
    assert users.update(bob) == 1
    db.commit()

    assert users.insert(User(username="alice")).is_failure
    db.rollback()


def update_constraint_violation_affects_nothing_test(db, stamper):
    users = SQLAlchemyRepository(User, db, stamper)
    users.insert(User(username="alice")).unwrap()
    bob = users.insert(User(username="bob")).unwrap()
    db.commit()

    bob.username = "alice"

    assert users.update(bob) == 0
    db.rollback()


def column_defaults_applied_test(db, stamper):
    users = SQLAlchemyRepository(User, db, stamper)
    categories = SQLAlchemyRepository(Category, db, stamper)

    user = users.insert(User(username="alice")).unwrap()
    category = categories.insert(Category(name="文具")).unwrap()

    assert user.status == 1
    assert user.role == "user"
    assert category.sort_order == 0


def default_stamper_uses_wall_clock_test(db):
    goods = SQLAlchemyRepository(Good, db)

    good = goods.insert(_good()).unwrap()

    assert isinstance(good.create_time, datetime)
    assert good.create_time == good.update_time
    assert AuditStamper().now().tzinfo is None
