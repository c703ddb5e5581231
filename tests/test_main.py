import pytest
from unittest.mock import patch, MagicMock

import main

def test_main_function_exists():
    """Basic test to verify that the main function exists"""
    assert callable(main.main)

@patch('sys.exit')
@patch('main.PreviewWindow')
@patch('main.QApplication')
def test_main_success(mock_app, mock_window, mock_exit):
    """Test that main shows the preview window and runs the event loop"""
    mock_app_instance = MagicMock()
    mock_app_instance.exec.return_value = 0
    mock_app.return_value = mock_app_instance

    main.main()

    mock_window.assert_called_once()
    mock_window.return_value.show.assert_called_once()
    mock_app_instance.exec.assert_called_once()
    mock_exit.assert_called_once_with(0)

@patch('sys.exit')
@patch('main.PreviewWindow')
@patch('main.QApplication')
def test_main_startup_error(mock_app, mock_window, mock_exit):
    """Test that main exits with status 1 when the window cannot be created"""
    mock_window.side_effect = Exception("no display")

    main.main()

    mock_exit.assert_called_once_with(1)
