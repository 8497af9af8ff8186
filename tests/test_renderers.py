from holograph.protocols import FencedCodeHandler
from holograph.renderers import ExampleCodeHandler, MarkdownRenderer, parse_fence_info


def test_parse_fence_info():
    assert parse_fence_info("html") == ("html", "")
    assert parse_fence_info("html,21") == ("html", "21")
    assert parse_fence_info("css_example, 3") == ("css_example", "3")
    assert parse_fence_info(None) == ("", "")
    assert parse_fence_info("not a language!") == ("", "")


def test_example_handler_plain_block():
    handler = ExampleCodeHandler(highlight=False)
    html = handler.render("<b>hi</b>\n", "html")
    assert html == (
        '<div class="codeBlock"><pre class="prettyprint language-html">'
        "&lt;b&gt;hi&lt;/b&gt;\n</pre></div>\n"
    )


def test_example_handler_line_numbers():
    handler = ExampleCodeHandler(highlight=False)
    html = handler.render(".a {}\n", "css,21")
    assert '<pre class="prettyprint language-css linenums:21">' in html


def test_example_handler_without_language():
    handler = ExampleCodeHandler(highlight=False)
    html = handler.render("x < y\n")
    assert html.startswith('<div class="codeBlock"><pre class="prettyprint">x &lt; y')


def test_example_handler_renders_live_example():
    handler = ExampleCodeHandler(highlight=False)
    html = handler.render('<button class="btn">Go</button>\n', "html_example")
    assert html.startswith(
        '<div class="codeExample"><div class="exampleOutput">'
        '<button class="btn">Go</button>\n</div>'
    )
    assert '<pre class="prettyprint language-html_example">' in html
    assert '&lt;button class="btn"&gt;Go&lt;/button&gt;' in html
    assert html.endswith("</pre></div></div>\n")


def test_example_handler_highlights_with_pygments():
    html = ExampleCodeHandler().render("<p>hi</p>\n", "html_example")
    assert '<div class="exampleOutput"><p>hi</p>\n</div>' in html
    assert "<span" in html
    assert "<p>hi</p>\n</pre>" not in html


def test_example_handler_unknown_language_is_escaped():
    html = ExampleCodeHandler().render("<x>\n", "nosuchlanguage")
    assert "&lt;x&gt;" in html


def test_example_handler_is_a_fenced_code_handler():
    assert isinstance(ExampleCodeHandler(), FencedCodeHandler)


def test_markdown_renderer_passes_raw_html_through():
    html = MarkdownRenderer().render('\n\n# Buttons\n\n<div class="swatch">red</div>\n')
    assert "<h1>Buttons</h1>" in html
    assert '<div class="swatch">red</div>' in html


def test_markdown_renderer_renders_examples():
    content = "Intro\n\n```html_example\n<em>live</em>\n```\n"
    html = MarkdownRenderer().render(content)
    assert "<p>Intro</p>" in html
    assert '<div class="codeExample"><div class="exampleOutput"><em>live</em>' in html


def test_markdown_renderer_uses_custom_code_handler():
    class Upper:
        def render(self, code, info=None):
            return f"<pre>{code.upper()}</pre>"

    html = MarkdownRenderer(code_handler=Upper()).render("```\nabc\n```\n")
    assert "<pre>ABC\n</pre>" in html
