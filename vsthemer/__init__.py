"""vsthemer: a terminal viewer and editor for Visual Studio color themes."""
