import pytest

from kcmutils.helm import RegistryType, determine_default_repository_type


@pytest.mark.parametrize(
    "url, expected",
    [
        ("oci://kcm-local-registry:5000/charts", "oci"),
        ("https://registry.example.com", "default"),
        ("http://docker.io", "default"),
    ],
)
def test_valid_urls(url, expected):
    result = determine_default_repository_type(url)
    assert result == expected
    assert result.value == expected


def test_oci_is_enum_member():
    assert determine_default_repository_type("oci://host/charts") is RegistryType.OCI


@pytest.mark.parametrize("url", ["ftp://ftp.example.com", "not-a-url"])
def test_invalid_urls(url):
    with pytest.raises(ValueError, match="invalid default registry URL scheme"):
        determine_default_repository_type(url)


def test_unparsable_url():
    with pytest.raises(ValueError, match="failed to parse default registry URL"):
        determine_default_repository_type("http://[::1")