import pytest

from pagedrops.framework import (
    DriverError,
    NavigationVerificationFailed,
    NoSessionError,
    PageObject,
    UnknownCapability,
    element,
    page_title,
    page_url,
)

from testsuites.unit.fakes import FakeElement, FakeSession


class LoginPage(PageObject):
    @page_url(required=True)
    def page_url(self, next_path=None):
        suffix = f"?next={next_path}" if next_path else ""
        return f"http://app.test/login{suffix}"

    @page_title
    def page_title(self):
        return "Login"


class LandingPage(PageObject):
    @page_url
    def page_url(self):
        return "http://app.test/"


@pytest.fixture(autouse=True)
def _no_default_session():
    PageObject.use_session(None)
    yield
    PageObject.use_session(None)


class TestDelegation:

    def test_supported_call_is_forwarded(self):
        session = FakeSession()
        page = LandingPage(session)
        page.refresh()
        assert session.refreshed == 1
        assert page.current_url() == "about:blank"

    def test_unsupported_call_raises_unknown_capability(self):
        page = LandingPage(FakeSession())
        with pytest.raises(UnknownCapability) as exc_info:
            page.zoom_in()
        assert exc_info.value.name == "zoom_in"
        assert isinstance(exc_info.value, AttributeError)
        assert isinstance(exc_info.value, DriverError)

    def test_unadvertised_session_method_is_not_forwarded(self):
        page = LandingPage(FakeSession())
        assert not hasattr(page, "debug_dump")

    def test_session_without_capabilities_forwards_public_attributes(self):
        class LooseSession:
            def shout(self):
                return "hi"

            def _secret(self):
                return "no"

        page = LandingPage(LooseSession())
        assert page.shout() == "hi"
        assert not hasattr(page, "_secret")

    def test_goto_missing_when_url_not_declared(self):
        class NoUrl(PageObject):
            pass

        with pytest.raises(UnknownCapability):
            NoUrl(FakeSession()).goto()

    def test_dir_lists_forwarded_capabilities(self):
        names = dir(LandingPage(FakeSession()))
        assert "refresh" in names
        assert "fill_form" in names
        assert "debug_dump" not in names


class TestVisit:

    def test_visit_navigates_and_verifies(self):
        session = FakeSession(title="Login")
        page = LoginPage.visit(session=session)

        assert isinstance(page, LoginPage)
        assert session.visited == ["http://app.test/login"]

    def test_goto_passes_arguments_to_url_builder(self):
        session = FakeSession()
        LoginPage(session).goto("/home")
        assert session.visited == ["http://app.test/login?next=/home"]

    def test_visit_raises_when_url_never_matches(self):
        session = FakeSession(
            title="Login",
            redirects={"http://app.test/login": "http://app.test/sso"},
        )
        with pytest.raises(NavigationVerificationFailed) as exc_info:
            LoginPage.visit(session=session)

        assert exc_info.value.page_class is LoginPage
        assert "Expected to be on LoginPage" in str(exc_info.value)

    def test_unverifiable_page_skips_verification(self):
        session = FakeSession(redirects={"http://app.test/": "http://elsewhere.test/"})
        page = LandingPage.visit(session=session)

        assert session.waits == []
        assert page.session is session

    def test_visit_uses_default_session(self):
        session = FakeSession(title="Login")
        PageObject.use_session(session)

        page = LoginPage.visit()
        assert page.session is session
        assert PageObject.default_session() is session
        assert LoginPage.default_session() is session

    def test_explicit_session_wins_over_default(self):
        PageObject.use_session(FakeSession())
        explicit = FakeSession()
        assert LandingPage(explicit).session is explicit

    def test_missing_session_raises(self):
        with pytest.raises(NoSessionError):
            LandingPage()


class TestDiagnostics:

    def test_repr_shows_url_and_title(self):
        session = FakeSession(url="http://app.test/login", title="Login")
        page = LoginPage(session)
        assert repr(page) == "<LoginPage url='http://app.test/login' title='Login'>"
        assert page.selector_string() == repr(page)

    def test_required_element_page_fails_visit(self):
        class CartPage(PageObject):
            @page_url
            def page_url(self):
                return "http://app.test/cart"

            checkout = element(lambda page: page.session.element("#checkout"), required=True)

        session = FakeSession(elements={"#checkout": FakeElement(present=False)})
        with pytest.raises(NavigationVerificationFailed, match="CartPage"):
            CartPage.visit(session=session)
