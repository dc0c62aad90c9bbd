import pytest

from analyzer.services import ServiceCatalog, UNKNOWN_SERVICE


@pytest.fixture
def catalog():
    return ServiceCatalog()


@pytest.mark.parametrize("port, name", [
    (22, "SSH (Secure Shell)"),
    (443, "HTTPS (Secure Web Traffic)"),
    (3389, "RDP (Remote Desktop Protocol)"),
    (10000, "Webmin"),
])
def test_known_ports(catalog, port, name):
    assert catalog.describe(port) == name


def test_unknown_port(catalog):
    assert catalog.describe(54321) == UNKNOWN_SERVICE == "Unknown Service"


def test_table_is_read_only(catalog):
    with pytest.raises(TypeError):
        catalog.SERVICES[54321] = "Backdoor"


def test_table_size(catalog):
    assert len(catalog) == 59
    assert 514 in catalog
