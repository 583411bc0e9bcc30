#!/usr/bin/env python3
# pylint: disable=missing-class-docstring,missing-function-docstring,missing-module-docstring

import unittest
from unittest.mock import MagicMock, patch

from feeph.i2c import EmulatedI2C

import feeph.emc2301.register_bus as sut  # sytem under test
from feeph.emc2301.errors import BusOpenError, InvalidArgument, RegisterIOError


class TestSMBusRegisterBus(unittest.TestCase):

    def setUp(self):
        patcher = patch('smbus2.SMBus')
        self.smbus_class = patcher.start()
        self.addCleanup(patcher.stop)
        self.smbus = self.smbus_class.return_value

    def test_open(self):
        # -----------------------------------------------------------------
        connection = sut.SMBusRegisterBus().open(bus_index=10, i2c_address=0x2F)
        # -----------------------------------------------------------------
        self.smbus_class.assert_called_once_with(10)
        self.assertTrue(connection.is_open())

    def test_open_failure(self):
        self.smbus_class.side_effect = FileNotFoundError(2, "No such file or directory")
        # -----------------------------------------------------------------
        # -----------------------------------------------------------------
        self.assertRaises(BusOpenError, sut.SMBusRegisterBus().open, bus_index=10, i2c_address=0x2F)

    def test_read_register(self):
        self.smbus.read_byte_data.return_value = 0x37
        connection = sut.SMBusRegisterBus().open(bus_index=10, i2c_address=0x2F)
        # -----------------------------------------------------------------
        computed = connection.read_register(0xFD)
        expected = 0x37
        # -----------------------------------------------------------------
        self.assertEqual(computed, expected)
        self.smbus.read_byte_data.assert_called_once_with(0x2F, 0xFD)

    def test_read_register_failure(self):
        self.smbus.read_byte_data.side_effect = OSError(121, "Remote I/O error")
        connection = sut.SMBusRegisterBus().open(bus_index=10, i2c_address=0x2F)
        # -----------------------------------------------------------------
        # -----------------------------------------------------------------
        self.assertRaises(RegisterIOError, connection.read_register, 0xFD)
        # no retries
        self.assertEqual(self.smbus.read_byte_data.call_count, 1)

    def test_write_register(self):
        connection = sut.SMBusRegisterBus().open(bus_index=10, i2c_address=0x2F)
        # -----------------------------------------------------------------
        connection.write_register(0x30, 0xFF)
        # -----------------------------------------------------------------
        self.smbus.write_byte_data.assert_called_once_with(0x2F, 0x30, 0xFF)

    def test_write_register_out_of_range(self):
        connection = sut.SMBusRegisterBus().open(bus_index=10, i2c_address=0x2F)
        # -----------------------------------------------------------------
        # -----------------------------------------------------------------
        for value in [-1, 0x100, 0x1FF]:
            self.assertRaises(InvalidArgument, connection.write_register, 0x30, value)
        self.smbus.write_byte_data.assert_not_called()

    def test_write_register_failure(self):
        self.smbus.write_byte_data.side_effect = OSError(121, "Remote I/O error")
        connection = sut.SMBusRegisterBus().open(bus_index=10, i2c_address=0x2F)
        # -----------------------------------------------------------------
        # -----------------------------------------------------------------
        self.assertRaises(RegisterIOError, connection.write_register, 0x30, 0x80)

    def test_close(self):
        # -----------------------------------------------------------------
        with sut.SMBusRegisterBus().open(bus_index=10, i2c_address=0x2F) as connection:
            pass
        # -----------------------------------------------------------------
        self.assertFalse(connection.is_open())
        self.smbus.close.assert_called_once_with()
        self.assertRaises(RegisterIOError, connection.read_register, 0xFD)
        self.assertRaises(RegisterIOError, connection.write_register, 0x30, 0x80)


class TestBusioRegisterBus(unittest.TestCase):

    def setUp(self):
        self.i2c_adr = 0x2F
        registers = {
            0x30: 0x00,  # fan setting
            0x32: 0x2B,  # fan configuration 1
            0xFD: 0x37,  # product id
        }
        self.i2c_bus = EmulatedI2C(state={self.i2c_adr: registers})
        self.buses = {1: self.i2c_bus}

    def opener(self, bus_index: int):
        if bus_index in self.buses:
            return self.buses[bus_index]
        else:
            raise ValueError(f"No I2C device at bus {bus_index}")

    def test_read_register(self):
        connection = sut.BusioRegisterBus(opener=self.opener).open(bus_index=1, i2c_address=self.i2c_adr)
        # -----------------------------------------------------------------
        computed = connection.read_register(0xFD)
        expected = 0x37
        # -----------------------------------------------------------------
        self.assertEqual(computed, expected)

    def test_write_register(self):
        connection = sut.BusioRegisterBus(opener=self.opener).open(bus_index=1, i2c_address=self.i2c_adr)
        # -----------------------------------------------------------------
        connection.write_register(0x30, 0x80)
        # -----------------------------------------------------------------
        self.assertEqual(connection.read_register(0x30), 0x80)

    def test_open_failure(self):
        # -----------------------------------------------------------------
        # -----------------------------------------------------------------
        self.assertRaises(BusOpenError, sut.BusioRegisterBus(opener=self.opener).open, bus_index=2, i2c_address=self.i2c_adr)

    def test_close_deinitializes_bus(self):
        i2c_bus = MagicMock()
        connection = sut.BusioConnection(bus_index=1, i2c_address=self.i2c_adr, i2c_bus=i2c_bus)
        # -----------------------------------------------------------------
        connection.close()
        # -----------------------------------------------------------------
        i2c_bus.deinit.assert_called_once_with()

    def test_read_register_failure(self):
        for error in [OSError(121, "Remote I/O error"), RuntimeError("bus is not responding")]:
            i2c_bus = MagicMock()
            i2c_bus.try_lock.return_value = True
            i2c_bus.readfrom_into.side_effect = error
            i2c_bus.writeto.side_effect = error
            i2c_bus.writeto_then_readfrom.side_effect = error
            connection = sut.BusioConnection(bus_index=1, i2c_address=self.i2c_adr, i2c_bus=i2c_bus)
            # -------------------------------------------------------------
            # -------------------------------------------------------------
            self.assertRaises(RegisterIOError, connection.read_register, 0xFD)

    def test_write_register_failure(self):
        for error in [OSError(121, "Remote I/O error"), RuntimeError("bus is not responding")]:
            i2c_bus = MagicMock()
            i2c_bus.try_lock.return_value = True
            i2c_bus.writeto.side_effect = error
            i2c_bus.writeto_then_readfrom.side_effect = error
            connection = sut.BusioConnection(bus_index=1, i2c_address=self.i2c_adr, i2c_bus=i2c_bus)
            # -------------------------------------------------------------
            # -------------------------------------------------------------
            self.assertRaises(RegisterIOError, connection.write_register, 0x30, 0x80)
