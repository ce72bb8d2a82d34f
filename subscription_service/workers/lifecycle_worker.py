from PySide6 import QtCore

from subscription_service.services.subscription_service import SubscriptionService


class RenewSignals(QtCore.QObject):
    """
    Defines the signals available from a running RenewWorker.

    Attributes:
        finished (bool): Emitted with True if renewed, False if the payment was declined.
        error (str): Emitted with an error message if the renewal fails.
    """
    finished = QtCore.Signal(bool)
    error = QtCore.Signal(str)


class SweepSignals(QtCore.QObject):
    """
    Defines the signals available from a running SweepWorker.

    Attributes:
        finished (list): Emitted with the ids of the deactivated members.
        error (str): Emitted with an error message if the sweep fails.
    """
    finished = QtCore.Signal(list)
    error = QtCore.Signal(str)


class RenewWorker(QtCore.QRunnable):
    """
    Background worker that renews one member's subscription.
    Keeps payment verification and storage calls off the GUI thread.
    """
    def __init__(self, service: SubscriptionService, member_id: int, amount: float, days: int):
        super().__init__()
        self.service = service
        self.member_id = member_id
        self.amount = amount
        self.days = days
        self.signals = RenewSignals()

    @QtCore.Slot()
    def run(self) -> None:
        try:
            renewed = self.service.renew_subscription(self.member_id, self.amount, self.days)
            self.signals.finished.emit(renewed)
        except Exception as e:
            self.signals.error.emit(str(e))


class SweepWorker(QtCore.QRunnable):
    """
    Background worker that runs the expiration sweep over all members.
    """
    def __init__(self, service: SubscriptionService):
        super().__init__()
        self.service = service
        self.signals = SweepSignals()

    @QtCore.Slot()
    def run(self) -> None:
        try:
            deactivated = self.service.deactivate_expired_members()
            self.signals.finished.emit(deactivated)
        except Exception as e:
            self.signals.error.emit(str(e))
