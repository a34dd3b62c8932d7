from selfmake.bootstrap.rebuild import SelfRebuilder, backup_path, rebuild_self

__all__ = ['SelfRebuilder', 'backup_path', 'rebuild_self']
