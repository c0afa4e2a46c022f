"""
Tests for core.logging module.
"""

import io

from unittest.mock import MagicMock


class TestConsolePrint:
    """Tests for build console output."""
    
    def test_writes_line(self):
        from bbstatus.core.logging import console_print
        
        console = io.StringIO()
        console_print(console, "hello")
        
        assert console.getvalue() == "hello\n"
    
    def test_no_console(self):
        """Test that a missing console is ignored."""
        from bbstatus.core.logging import console_print
        
        console_print(None, "hello")
    
    def test_closed_console_ignored(self):
        """Test that writing to a closed stream does not raise."""
        from bbstatus.core.logging import console_print
        
        console = io.StringIO()
        console.close()
        
        console_print(console, "hello")
    
    def test_broken_pipe_ignored(self):
        """Test that OS-level write errors do not raise."""
        from bbstatus.core.logging import console_print
        
        console = MagicMock()
        console.write.side_effect = BrokenPipeError("pipe closed")
        
        console_print(console, "hello")
        
        console.flush.assert_not_called()
