"""Tests for the supplier use cases."""

from unittest.mock import MagicMock

import pytest

from bodega.application.use_cases.delete_supplier import DeleteSupplierUseCase
from bodega.application.use_cases.register_supplier import RegisterSupplierUseCase
from bodega.application.use_cases.supplier_queries import (
    GetSupplierUseCase,
    ListSuppliersUseCase,
)
from bodega.application.use_cases.update_supplier import UpdateSupplierUseCase
from bodega.core.entities.supplier import Supplier
from bodega.core.exceptions import (
    ConflictError,
    DuplicateSupplierNameError,
    DuplicateSupplierRucError,
    NotFoundError,
    ValidationError,
)
from bodega.core.interfaces.supplier_repository import ISupplierRepository


@pytest.fixture
def mock_supplier_repo():
    repo = MagicMock(spec=ISupplierRepository)
    repo.find_by_id.return_value = None
    repo.find_by_name.return_value = None
    repo.find_by_ruc.return_value = None
    repo.has_products.return_value = False
    return repo


class TestRegisterSupplierUseCase:
    def test_registers(self, mock_supplier_repo):
        supplier = RegisterSupplierUseCase(mock_supplier_repo).execute(
            1, "Distribuidora Lima", 20123456789
        )
        mock_supplier_repo.save.assert_called_once_with(supplier)
        assert supplier.ruc == 20123456789

    def test_duplicate_name(self, mock_supplier_repo, sample_supplier):
        mock_supplier_repo.find_by_name.return_value = sample_supplier

        with pytest.raises(DuplicateSupplierNameError):
            RegisterSupplierUseCase(mock_supplier_repo).execute(
                2, "Distribuidora Lima", 20999999999
            )
        mock_supplier_repo.save.assert_not_called()

    def test_duplicate_ruc(self, mock_supplier_repo, sample_supplier):
        mock_supplier_repo.find_by_ruc.return_value = sample_supplier

        with pytest.raises(DuplicateSupplierRucError):
            RegisterSupplierUseCase(mock_supplier_repo).execute(2, "Otro SAC", 20123456789)
        mock_supplier_repo.save.assert_not_called()

    def test_invalid_ruc(self, mock_supplier_repo):
        with pytest.raises(ValidationError):
            RegisterSupplierUseCase(mock_supplier_repo).execute(2, "Otro SAC", 123)
        mock_supplier_repo.save.assert_not_called()


class TestUpdateSupplierUseCase:
    def test_updates(self, mock_supplier_repo, sample_supplier):
        mock_supplier_repo.find_by_id.return_value = sample_supplier

        UpdateSupplierUseCase(mock_supplier_repo).execute(1, "Mayorista Norte", 20555555555)

        assert sample_supplier.name == "Mayorista Norte"
        assert sample_supplier.ruc == 20555555555
        mock_supplier_repo.update.assert_called_once_with(sample_supplier)

    def test_not_found(self, mock_supplier_repo):
        with pytest.raises(NotFoundError):
            UpdateSupplierUseCase(mock_supplier_repo).execute(1, "X SAC", 20555555555)

    def test_self_matches_are_ignored(self, mock_supplier_repo, sample_supplier):
        mock_supplier_repo.find_by_id.return_value = sample_supplier
        mock_supplier_repo.find_by_name.return_value = sample_supplier
        mock_supplier_repo.find_by_ruc.return_value = sample_supplier

        UpdateSupplierUseCase(mock_supplier_repo).execute(
            1, "Distribuidora Lima", 20123456789
        )
        mock_supplier_repo.update.assert_called_once()

    def test_name_taken_by_other(self, mock_supplier_repo, sample_supplier):
        other = Supplier(id=2, name="Mayorista Norte", ruc=20555555555)
        mock_supplier_repo.find_by_id.return_value = sample_supplier
        mock_supplier_repo.find_by_name.return_value = other

        with pytest.raises(DuplicateSupplierNameError):
            UpdateSupplierUseCase(mock_supplier_repo).execute(1, "Mayorista Norte", 20123456789)
        mock_supplier_repo.update.assert_not_called()

    def test_ruc_taken_by_other(self, mock_supplier_repo, sample_supplier):
        other = Supplier(id=2, name="Mayorista Norte", ruc=20555555555)
        mock_supplier_repo.find_by_id.return_value = sample_supplier
        mock_supplier_repo.find_by_ruc.return_value = other

        with pytest.raises(DuplicateSupplierRucError):
            UpdateSupplierUseCase(mock_supplier_repo).execute(1, "Lima SAC", 20555555555)
        mock_supplier_repo.update.assert_not_called()

    def test_invalid_ruc_leaves_supplier_untouched(self, mock_supplier_repo, sample_supplier):
        mock_supplier_repo.find_by_id.return_value = sample_supplier

        with pytest.raises(ValidationError):
            UpdateSupplierUseCase(mock_supplier_repo).execute(1, "Nuevo Nombre", 42)
        assert sample_supplier.name == "Distribuidora Lima"
        mock_supplier_repo.update.assert_not_called()


class TestDeleteSupplierUseCase:
    def test_deletes(self, mock_supplier_repo, sample_supplier):
        mock_supplier_repo.find_by_id.return_value = sample_supplier
        DeleteSupplierUseCase(mock_supplier_repo).execute(1)
        mock_supplier_repo.delete.assert_called_once_with(1)

    def test_not_found(self, mock_supplier_repo):
        with pytest.raises(NotFoundError):
            DeleteSupplierUseCase(mock_supplier_repo).execute(1)
        mock_supplier_repo.delete.assert_not_called()

    def test_has_products(self, mock_supplier_repo, sample_supplier):
        mock_supplier_repo.find_by_id.return_value = sample_supplier
        mock_supplier_repo.has_products.return_value = True

        with pytest.raises(ConflictError):
            DeleteSupplierUseCase(mock_supplier_repo).execute(1)
        mock_supplier_repo.delete.assert_not_called()


class TestSupplierQueries:
    def test_list(self, mock_supplier_repo, sample_supplier):
        mock_supplier_repo.list_all.return_value = [sample_supplier]
        assert ListSuppliersUseCase(mock_supplier_repo).execute() == [sample_supplier]

    def test_get(self, mock_supplier_repo, sample_supplier):
        mock_supplier_repo.find_by_id.return_value = sample_supplier
        assert GetSupplierUseCase(mock_supplier_repo).execute(1) is sample_supplier

    def test_get_missing(self, mock_supplier_repo):
        with pytest.raises(NotFoundError):
            GetSupplierUseCase(mock_supplier_repo).execute(1)
