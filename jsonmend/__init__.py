"""Core logic for jsonmend.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- repair JSON-like text (JavaScript notation, JSONP, comments, ...) into JSON
- parse, stringify and compile path expressions like '.items[3].name'
- locate paths in a JSON text by line and column
- look up, set and sort values by path
"""
