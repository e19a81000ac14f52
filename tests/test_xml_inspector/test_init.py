"""Test module for xml_inspector package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import xml_inspector

    # Assert
    assert xml_inspector is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import xml_inspector

    # Assert
    assert isinstance(xml_inspector.__version__, str)
    assert xml_inspector.__version__ == "0.1.0"


def test_package_has_author() -> None:
    """Test that the package has an author attribute."""
    # Arrange & Act
    import xml_inspector

    # Assert
    assert xml_inspector.__author__ == "XML Inspector Team"


def test_package_all_exports() -> None:
    """Test that every name in __all__ is importable."""
    # Arrange & Act
    import xml_inspector

    # Assert
    missing = [name for name in xml_inspector.__all__ if not hasattr(xml_inspector, name)]
    assert missing == []
    assert "assert_xml_match" in xml_inspector.__all__
    assert "XMLMatchAssertion" in xml_inspector.__all__
