from shortlinker.dao.base.shortlink_base_dao import ShortlinkBaseDAO


__all__ = ['ShortlinkBaseDAO']
