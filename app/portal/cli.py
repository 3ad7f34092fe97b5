#!/usr/bin/env python3
"""Terminal front-end for the alumni portal login and signup forms."""
import argparse
import getpass
import sys

from portal.api.client import ApiClient
from portal.config.constants import (API_BASE_URL, DEPARTMENT_CATALOG,
                                     LOGIN_MODE, SIGNUP_MODE)
from portal.config.settings import configure_logging
from portal.flow.context import PortalContext, build_context
from portal.flow.events import (CourseChanged, FormSubmitted, SwitchRequested,
                                create_dispatcher)
from portal.flow.session import is_authenticated, logout
from portal.ui.navigation import NavigatorInterface


class TerminalNavigator(NavigatorInterface):
    """Prints the redirect target instead of opening it"""

    def navigate(self, url: str) -> None:
        print(f"Redirecting to {url}")


def _read_password(args: argparse.Namespace, prompt: str = "Password: ") -> str:
    if args.password is not None:
        return args.password
    return getpass.getpass(prompt)


def _finish(context: PortalContext, success: bool) -> int:
    """Print the banner, then let pending redirects or switches run"""
    area = context.view.message_area
    if area.visible:
        print(f"[{area.kind}] {area.text}")
    # The banner is already printed; only navigation timers are worth waiting for
    context.messages.hide()
    context.scheduler.run_until_idle()
    return 0 if success else 1


def run_login(context: PortalContext, args: argparse.Namespace) -> int:
    dispatcher = create_dispatcher(context)
    dispatcher.dispatch(SwitchRequested(LOGIN_MODE))
    context.view.login_form.fill(
        registrationNumber=args.reg_no,
        password=_read_password(args)
    )
    success, _ = dispatcher.dispatch(FormSubmitted(LOGIN_MODE))
    return _finish(context, success)


def run_signup(context: PortalContext, args: argparse.Namespace) -> int:
    dispatcher = create_dispatcher(context)
    dispatcher.dispatch(SwitchRequested(SIGNUP_MODE))
    dispatcher.dispatch(CourseChanged(args.course))

    password = _read_password(args)
    confirm = args.confirm_password
    if confirm is None:
        confirm = password if args.password is not None else getpass.getpass("Confirm password: ")

    form = context.view.signup_form
    try:
        if args.department:
            form.fill(department=args.department)
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    form.fill(
        name=args.name,
        fatherName=args.father_name,
        registrationNumber=args.reg_no,
        passingYear=args.year,
        password=password,
        confirmPassword=confirm,
        currentPosition=args.position,
        currentCompany=args.company
    )
    success, _ = dispatcher.dispatch(FormSubmitted(SIGNUP_MODE))
    return _finish(context, success)


def run_logout(context: PortalContext, args: argparse.Namespace) -> int:
    if logout(context):
        print("Signed out")
    else:
        print("No active session")
    return 0


def run_status(context: PortalContext, args: argparse.Namespace) -> int:
    if is_authenticated(context):
        print("Signed in")
        return 0
    print("Not signed in")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Alumni portal sign in / sign up",
        epilog="""
Examples:
  # Sign in (prompts for the password)
  %(prog)s login AB123456

  # Register
  %(prog)s signup --name "Asha Kumari" --father-name "Ramesh Kumar" \\
      --course UG --department HISTORY --reg-no AB123456 --year 2019

  # Session
  %(prog)s status
  %(prog)s logout
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--api-url",
        default=API_BASE_URL,
        help=f"Backend base URL (default: {API_BASE_URL})"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    login_parser = subparsers.add_parser("login", help="Sign in")
    login_parser.add_argument("reg_no", help="Registration number")
    login_parser.add_argument("--password", help="Password (prompted when omitted)")
    login_parser.set_defaults(handler=run_login)

    signup_parser = subparsers.add_parser("signup", help="Create an account")
    signup_parser.add_argument("--name", required=True)
    signup_parser.add_argument("--father-name", required=True)
    signup_parser.add_argument("--course", choices=sorted(DEPARTMENT_CATALOG), required=True)
    signup_parser.add_argument("--department", default="")
    signup_parser.add_argument("--reg-no", required=True, help="Registration number")
    signup_parser.add_argument("--year", required=True, help="Passing year")
    signup_parser.add_argument("--position", default="", help="Current position")
    signup_parser.add_argument("--company", default="", help="Current company")
    signup_parser.add_argument("--password", help="Password (prompted when omitted)")
    signup_parser.add_argument("--confirm-password", help="Defaults to --password")
    signup_parser.set_defaults(handler=run_signup)

    subparsers.add_parser("logout", help="Drop the stored session").set_defaults(handler=run_logout)
    subparsers.add_parser("status", help="Show whether a session is stored").set_defaults(handler=run_status)

    return parser


def main(argv=None) -> int:
    """CLI entry point."""
    configure_logging()
    args = build_parser().parse_args(argv)
    context = build_context(api=ApiClient(args.api_url), navigator=TerminalNavigator())
    return args.handler(context, args)


if __name__ == "__main__":
    sys.exit(main())
