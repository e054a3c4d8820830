"""Shared fixtures for localcas tests."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from localcas.managers import ObjectManager
from localcas.repositories import ObjectRepository
from localcas.services import ObjectService


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def manager(tmp_path: Path) -> ObjectManager:
    om = ObjectManager(tmp_path / "repo")
    om.init()
    return om


@pytest.fixture
def object_repo(manager: ObjectManager) -> ObjectRepository:
    return ObjectRepository(manager.repo_path)


@pytest.fixture
def service(object_repo: ObjectRepository) -> ObjectService:
    return ObjectService(object_repo)
