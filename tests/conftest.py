import pytest

ARTICLE_TEMPLATE = (
    '<h1>Brewing Coffee At Home</h1>'
    '<p>Good coffee starts with fresh beans.</p>'
    '<h2>Choosing Beans</h2>'
    '<p>{filler}</p>'
    '<h2>Grinding Them</h2>'
    '<p>A burr grinder gives coffee an even texture.</p>'
    '<img src="/img/beans.jpg" alt="Roasted beans">'
    '<p>Read our <a href="/guides/storage">storage guide</a> for more tips.</p>'
    '<p>Enjoy your coffee.</p>'
)


@pytest.fixture
def seo_article():
    """310 words, focus keyword "coffee" four times, one H1, two H2s, one image, one internal link."""
    return ARTICLE_TEMPLATE.format(filler=" ".join(["Stir gently."] * 139))


@pytest.fixture
def short_article():
    return '<p>Too short to rank.</p>'
